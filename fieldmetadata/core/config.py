"""Configuration management"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""
    
    # Application
    app_name: str = "CRM Field Metadata"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "console"  # console, json, human, readable
    
    # CiviCRM REST endpoint (extern/rest.php)
    crm_api_url: str = "http://localhost/sites/all/modules/civicrm/extern/rest.php"
    crm_api_key: Optional[str] = None
    crm_site_key: Optional[str] = None
    crm_request_timeout: float = 5.0
    
    # Date ranges
    default_start_years: int = 20
    default_end_years: int = 20
    
    # Field naming
    custom_field_prefix: str = "custom_"
    
    # Widget mapping
    default_widget_context: str = "Angular"
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        env_prefix = "FIELDMETADATA_"
        extra = "ignore"


settings = Settings()
