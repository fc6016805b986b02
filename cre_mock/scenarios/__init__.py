"""Scenarios for generating CRE data sets."""

from cre_mock.scenarios.market import CreMarketScenario

__all__ = ["CreMarketScenario"]
