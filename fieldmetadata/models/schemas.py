"""Pydantic schemas for canonical field metadata"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Dict, Any, Union


def normalize_boolean(value: Any) -> str:
    """
    Convert the many CRM spellings of a flag ("", None, False, "0", 0, ...)
    to "1" or "0" so clients get a single predictable type.
    """
    if isinstance(value, str):
        return "0" if value.strip() in ("", "0") else "1"
    return "1" if value else "0"


class OptionSchema(BaseModel):
    """One selectable value within a field's choice list"""
    model_config = ConfigDict(extra="allow", validate_assignment=True)

    label: str = ""
    name: str = ""
    value: str = ""
    order: Union[int, float] = 0
    required: str = "0"
    default: str = "0"
    price: Any = False
    preText: str = ""
    postText: str = ""

    @field_validator("required", "default", mode="before")
    @classmethod
    def validate_flag(cls, v: Any) -> str:
        """Store flags as "1"/"0" """
        return normalize_boolean(v)

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> str:
        """Option values are always strings"""
        if v is None:
            return ""
        if isinstance(v, bool):
            return normalize_boolean(v)
        return str(v)


class FieldSchema(BaseModel):
    """Canonical form-input descriptor"""
    model_config = ConfigDict(extra="allow", validate_assignment=True)

    entity: Optional[str] = None
    label: str = ""
    name: str = ""
    order: Union[int, float] = 0
    required: str = "0"
    default: str = ""
    options: List[OptionSchema] = Field(default_factory=list)
    price: Any = Field(default_factory=list)
    displayPrice: Any = False
    quantity: Any = False
    preText: str = ""
    postText: str = ""
    widget: Optional[str] = None
    visibility: Optional[Union[int, str]] = None
    minDate: Optional[str] = None
    maxDate: Optional[str] = None

    @field_validator("required", mode="before")
    @classmethod
    def validate_required(cls, v: Any) -> str:
        """Store the required flag as "1"/"0" """
        return normalize_boolean(v)

    @field_validator("default", "preText", "postText", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> str:
        """CRM returns NULL for unset text columns"""
        return "" if v is None else str(v)

    def to_dict(self) -> Dict[str, Any]:
        """Render-layer shape: date bounds only appear on date fields"""
        exclude = {key for key in ("minDate", "maxDate") if getattr(self, key) is None}
        return self.model_dump(exclude=exclude)


class FieldMetadataSchema(BaseModel):
    """Normalized metadata for one entity: an ordered list of fields"""
    model_config = ConfigDict(extra="allow")

    fields: List[FieldSchema] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Render-layer shape of the whole record"""
        data = self.model_dump(exclude={"fields"})
        data["fields"] = [field.to_dict() for field in self.fields]
        return data


class CustomFieldConfigSchema(BaseModel):
    """Subset of a custom field definition used by the normalizers"""
    model_config = ConfigDict(extra="allow")

    id: str
    default_value: Optional[str] = None
    start_date_years: Optional[int] = None
    end_date_years: Optional[int] = None

    @field_validator("id", "default_value", mode="before")
    @classmethod
    def validate_str(cls, v: Any) -> Any:
        """Ids and defaults arrive as int or string"""
        return None if v is None else str(v)

    @field_validator("start_date_years", "end_date_years", mode="before")
    @classmethod
    def validate_years(cls, v: Any) -> Any:
        """Unset offsets come back as empty strings"""
        return None if v == "" else v


class DatePreferenceSchema(BaseModel):
    """Year offsets configured for a date format type"""
    name: str
    start: int = 20
    end: int = 20


class DateRangeSchema(BaseModel):
    """Inclusive selectable date range for a field"""
    minDate: str
    maxDate: str
