from __future__ import annotations

from governance_program.client.base import GovernanceProgramBaseClient
from governance_program.properties.elements import GovernanceMetricElement, GovernanceMetricImplementation
from governance_program.properties.governance import (
    GovernanceDefinitionMetricProperties,
    GovernanceExpectationsProperties,
    GovernanceMeasurementsDataSetProperties,
    GovernanceMeasurementsProperties,
    GovernanceMetricProperties,
    GovernanceResultsProperties,
)

DEFINITION_METRIC_RELATIONSHIP = "GovernanceDefinitionMetric"
RESULTS_RELATIONSHIP = "GovernanceResults"


class GovernanceMetricsManager:
    """Governance metrics, the definitions they measure and the data sets that hold their results."""

    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    def create_governance_metric(self, user_id: str, properties: GovernanceMetricProperties | None) -> str | None:
        return self._client.create_element(
            user_id,
            properties,
            properties_parameter_name="properties",
            path="/governance-metrics",
            method_name="create_governance_metric",
        )

    def update_governance_metric(
        self,
        user_id: str,
        metric_guid: str,
        is_merge_update: bool,
        properties: GovernanceMetricProperties | None,
    ) -> None:
        self._client.update_element(
            user_id,
            metric_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name="metricGUID",
            properties_parameter_name="properties",
            path="/governance-metrics/{2}/update?isMergeUpdate={3}",
            method_name="update_governance_metric",
        )

    def delete_governance_metric(self, user_id: str, metric_guid: str) -> None:
        self._client.remove_element(
            user_id,
            metric_guid,
            element_guid_parameter_name="metricGUID",
            path="/governance-metrics/{2}/delete",
            method_name="delete_governance_metric",
        )

    def setup_governance_definition_metric(
        self,
        user_id: str,
        metric_guid: str,
        governance_definition_guid: str,
        properties: GovernanceDefinitionMetricProperties | None = None,
    ) -> None:
        self._client.setup_relationship(
            user_id,
            metric_guid,
            governance_definition_guid,
            DEFINITION_METRIC_RELATIONSHIP,
            properties,
            primary_guid_parameter_name="metricGUID",
            secondary_guid_parameter_name="governanceDefinitionGUID",
            path="/governance-metrics/{2}/measurements/{3}",
            method_name="setup_governance_definition_metric",
        )

    def clear_governance_definition_metric(
        self, user_id: str, metric_guid: str, governance_definition_guid: str
    ) -> None:
        self._client.clear_relationship(
            user_id,
            metric_guid,
            governance_definition_guid,
            DEFINITION_METRIC_RELATIONSHIP,
            primary_guid_parameter_name="metricGUID",
            secondary_guid_parameter_name="governanceDefinitionGUID",
            path="/governance-metrics/{2}/measurements/{3}/delete",
            method_name="clear_governance_definition_metric",
        )

    def setup_governance_results(
        self,
        user_id: str,
        metric_guid: str,
        data_set_guid: str,
        properties: GovernanceResultsProperties | None = None,
    ) -> None:
        self._client.setup_relationship(
            user_id,
            metric_guid,
            data_set_guid,
            RESULTS_RELATIONSHIP,
            properties,
            primary_guid_parameter_name="metricGUID",
            secondary_guid_parameter_name="dataSetGUID",
            path="/governance-metrics/{2}/results-data-sets/{3}",
            method_name="setup_governance_results",
        )

    def clear_governance_results(self, user_id: str, metric_guid: str, data_set_guid: str) -> None:
        self._client.clear_relationship(
            user_id,
            metric_guid,
            data_set_guid,
            RESULTS_RELATIONSHIP,
            primary_guid_parameter_name="metricGUID",
            secondary_guid_parameter_name="dataSetGUID",
            path="/governance-metrics/{2}/results-data-sets/{3}/delete",
            method_name="clear_governance_results",
        )

    # Classifications: data sets holding measurements, and the expectations or
    # measurements attached to any element.

    def set_governance_measurements_data_set(
        self,
        user_id: str,
        data_set_guid: str,
        properties: GovernanceMeasurementsDataSetProperties | None = None,
    ) -> None:
        self._client.set_classification(
            user_id,
            data_set_guid,
            properties,
            element_guid_parameter_name="dataSetGUID",
            path="/elements/{2}/governance-measurements-data-set",
            method_name="set_governance_measurements_data_set",
        )

    def clear_governance_measurements_data_set(self, user_id: str, data_set_guid: str) -> None:
        self._client.remove_classification(
            user_id,
            data_set_guid,
            element_guid_parameter_name="dataSetGUID",
            path="/elements/{2}/governance-measurements-data-set/remove",
            method_name="clear_governance_measurements_data_set",
        )

    def set_governance_expectations(
        self,
        user_id: str,
        element_guid: str,
        properties: GovernanceExpectationsProperties | None = None,
    ) -> None:
        self._client.set_classification(
            user_id,
            element_guid,
            properties,
            element_guid_parameter_name="elementGUID",
            path="/elements/{2}/governance-expectations",
            method_name="set_governance_expectations",
        )

    def clear_governance_expectations(self, user_id: str, element_guid: str) -> None:
        self._client.remove_classification(
            user_id,
            element_guid,
            element_guid_parameter_name="elementGUID",
            path="/elements/{2}/governance-expectations/remove",
            method_name="clear_governance_expectations",
        )

    def set_governance_measurements(
        self,
        user_id: str,
        element_guid: str,
        properties: GovernanceMeasurementsProperties | None = None,
    ) -> None:
        self._client.set_classification(
            user_id,
            element_guid,
            properties,
            element_guid_parameter_name="elementGUID",
            path="/elements/{2}/governance-measurements",
            method_name="set_governance_measurements",
        )

    def clear_governance_measurements(self, user_id: str, element_guid: str) -> None:
        self._client.remove_classification(
            user_id,
            element_guid,
            element_guid_parameter_name="elementGUID",
            path="/elements/{2}/governance-measurements/remove",
            method_name="clear_governance_measurements",
        )

    def get_governance_metric_by_guid(self, user_id: str, metric_guid: str) -> GovernanceMetricElement | None:
        return self._client.get_element_by_guid(
            user_id,
            metric_guid,
            GovernanceMetricElement,
            element_guid_parameter_name="metricGUID",
            path="/governance-metrics/{2}",
            method_name="get_governance_metric_by_guid",
        )

    def find_governance_metrics(
        self, user_id: str, search_string: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceMetricElement]:
        return self._client.find_elements(
            user_id,
            search_string,
            GovernanceMetricElement,
            start_from,
            page_size,
            search_string_parameter_name="searchString",
            path="/governance-metrics/by-search-string",
            method_name="find_governance_metrics",
        )

    def get_governance_metric_implementations(
        self, user_id: str, governance_definition_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceMetricImplementation]:
        return self._client.get_elements_for_guid(
            user_id,
            governance_definition_guid,
            GovernanceMetricImplementation,
            start_from,
            page_size,
            element_guid_parameter_name="governanceDefinitionGUID",
            path="/governance-definitions/{2}/metric-implementations",
            method_name="get_governance_metric_implementations",
        )
