"""Sample workload exercising the ORM against the provisioned database."""

from .workload import SampleReport, run_sample_workload

__all__ = ["SampleReport", "run_sample_workload"]
