# dags/city_temp_avg_dag.py
from __future__ import annotations
import logging
from datetime import date, datetime, timedelta
from airflow.decorators import dag, task
from airflow.exceptions import AirflowFailException
from citytempavg.client import CityTemperatureClient, CityTemperatureError
from citytempavg.service import average_temperature, report_line

log = logging.getLogger(__name__)


@dag(
    dag_id="city_temp_avg",
    start_date=datetime(2025, 1, 1),
    schedule="0 6 * * *",
    catchup=False,
    default_args={"owner": "data-eng", "retries": 1, "retry_delay": timedelta(minutes=2)},
    tags=["weather", "city-avg-temp"],
)
def city_temp_avg():
    # one task, the per-city loop stays sequential inside it
    @task(pool="metaweather", execution_timeout=timedelta(minutes=30))
    def compute() -> dict:
        # wall-clock day, not the logical date which trails by one interval
        day = date.today()
        with CityTemperatureClient() as client:
            try:
                result = average_temperature(client, day)
            except CityTemperatureError as e:
                # Will include HTTP status/body snippets from our client
                raise AirflowFailException(f"city_temp_avg({day}) failed: {e}")

        return {
            "day": day.isoformat(),
            "cities": result.cities,
            "readings": result.readings,
            "skipped": result.skipped,
            "avg": round(result.average_temp, 2),
        }

    @task
    def publish(row: dict) -> None:
        log.info("%d of %d cities reported a temperature on %s", row["readings"], row["cities"], row["day"])
        print(report_line(row["cities"], row["avg"]))

    publish(compute())


dag = city_temp_avg()
