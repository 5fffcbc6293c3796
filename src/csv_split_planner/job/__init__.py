"""Job-level planning across many input files."""

from csv_split_planner.job.plan_job import plan_files, plan_job

__all__ = ["plan_files", "plan_job"]
