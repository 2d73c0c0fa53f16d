"""CRM lookup client for option groups, custom fields and date preferences"""
import json
import httpx
from typing import Dict, Any, List, Optional, Protocol
import logging
from datetime import datetime, timezone

from fieldmetadata.core.config import settings
from fieldmetadata.core.logging import get_logger, safe_log
from fieldmetadata.core.exceptions import CrmApiError, CrmRecordNotFoundError
from fieldmetadata.models.schemas import CustomFieldConfigSchema, DatePreferenceSchema

logger = get_logger(__name__)


class CrmLookupService(Protocol):
    """Lookups the normalization pipeline needs from the CRM"""

    def get_option_values(self, option_group: str) -> Dict[str, str]:
        """Map of option value (int-like string) -> option name for a group"""
        ...

    def get_custom_field(self, field_id: str) -> CustomFieldConfigSchema:
        """Date offsets and default value of a custom field"""
        ...

    def get_field_format_type(self, entity: str, field_name: str) -> Optional[str]:
        """Date format type of a core field, or None when it has none"""
        ...

    def get_date_preferences(self, format_type: str) -> DatePreferenceSchema:
        """Year offsets configured for a date format type"""
        ...

    def get_contact_types(self) -> List[str]:
        """Names of the active contact types"""
        ...


class CrmApiClient:
    """
    CrmLookupService backed by the CiviCRM APIv3 REST endpoint.

    Every call is a POST of entity/action plus JSON-encoded params. HTTP
    failures and is_error responses are raised as CrmApiError; empty result
    sets on single-record lookups are raised as CrmRecordNotFoundError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        site_key: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None
    ):
        self.base_url = (base_url or settings.crm_api_url or "").strip()
        self.api_key = api_key if api_key is not None else settings.crm_api_key
        self.site_key = site_key if site_key is not None else settings.crm_site_key
        self.timeout = timeout if timeout is not None else settings.crm_request_timeout
        self._client = client or httpx.Client(timeout=self.timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "CrmApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def call(self, entity: str, action: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Call one API action and return the decoded response.

        Args:
            entity: API entity (e.g. "OptionValue")
            action: API action (e.g. "get")
            params: API parameters

        Returns:
            Response payload with is_error == 0
        """
        if not self.base_url:
            safe_log(logger, logging.ERROR, "CRM API URL not configured", entity=entity)
            raise CrmApiError("CRM API URL not configured")

        start_time = datetime.now(timezone.utc)
        data = {
            "entity": entity,
            "action": action,
            "json": json.dumps(params or {}),
        }
        if self.api_key:
            data["api_key"] = self.api_key
        if self.site_key:
            data["key"] = self.site_key

        try:
            response = self._client.post(self.base_url, data=data)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            safe_log(
                logger,
                logging.ERROR,
                "Timeout calling CRM API",
                entity=entity,
                action=action,
                timeout=self.timeout
            )
            raise CrmApiError(f"Request timeout after {self.timeout}s") from e
        except httpx.ConnectError as e:
            safe_log(
                logger,
                logging.ERROR,
                "Connection error calling CRM API",
                entity=entity,
                action=action,
                url=self.base_url
            )
            raise CrmApiError("Failed to connect to CRM API") from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            safe_log(
                logger,
                logging.ERROR,
                "HTTP error calling CRM API",
                entity=entity,
                action=action,
                status_code=status_code
            )
            raise CrmApiError(f"HTTP error {status_code} from CRM API") from e
        except httpx.HTTPError as e:
            safe_log(
                logger,
                logging.ERROR,
                "Unexpected HTTP error",
                entity=entity,
                action=action,
                error_type=type(e).__name__,
                error_message=str(e)
            )
            raise CrmApiError(f"Unexpected error: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            safe_log(logger, logging.ERROR, "Failed to parse JSON response", entity=entity, action=action)
            raise CrmApiError("Invalid JSON response from CRM API") from e

        if not isinstance(payload, dict):
            raise CrmApiError("Invalid response structure from CRM API")

        if payload.get("is_error"):
            error_message = payload.get("error_message") or "Unknown error"
            safe_log(
                logger,
                logging.WARNING,
                "CRM API returned an error",
                entity=entity,
                action=action,
                error_message=error_message
            )
            raise CrmApiError(f"{entity}.{action}: {error_message}")

        duration = (datetime.now(timezone.utc) - start_time).total_seconds()
        safe_log(logger, logging.DEBUG, "CRM API call completed", entity=entity, action=action, duration=duration)
        return payload

    def _get_values(self, entity: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        params = dict(params, sequential=1)
        values = self.call(entity, "get", params).get("values") or []
        return [value for value in values if isinstance(value, dict)]

    def _get_single(self, entity: str, params: Dict[str, Any]) -> Dict[str, Any]:
        values = self._get_values(entity, params)
        if len(values) != 1:
            raise CrmRecordNotFoundError(f"Expected one {entity} but found {len(values)}")
        return values[0]

    def get_option_values(self, option_group: str) -> Dict[str, str]:
        values = self._get_values("OptionValue", {
            "option_group_id": option_group,
            "options": {"limit": 0},
        })
        return {str(value["value"]): value.get("name") for value in values if "value" in value}

    def get_custom_field(self, field_id: str) -> CustomFieldConfigSchema:
        value = self._get_single("CustomField", {
            "id": field_id,
            "return": ["id", "default_value", "start_date_years", "end_date_years"],
        })
        return CustomFieldConfigSchema(**value)

    def get_field_format_type(self, entity: str, field_name: str) -> Optional[str]:
        values = self.call(entity, "getfield", {"name": field_name, "action": "get"}).get("values")
        if not isinstance(values, dict):
            return None
        html = values.get("html")
        if not isinstance(html, dict):
            return None
        return html.get("formatType") or None

    def get_date_preferences(self, format_type: str) -> DatePreferenceSchema:
        value = self._get_single("PreferencesDate", {"name": format_type})
        return DatePreferenceSchema(
            name=value.get("name") or format_type,
            start=value.get("start") or 0,
            end=value.get("end") or 0
        )

    def get_contact_types(self) -> List[str]:
        values = self._get_values("ContactType", {"is_active": 1, "options": {"limit": 0}})
        return [value["name"] for value in values if value.get("name")]
