"""Read models for the overview screen."""

from finhealth.dashboard.data_provider import DashboardDataProvider

__all__ = ["DashboardDataProvider"]
