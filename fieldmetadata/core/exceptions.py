"""Custom exceptions"""


class FieldMetadataError(Exception):
    """Base exception for field metadata normalization"""
    pass


class NormalizerNotRegisteredError(FieldMetadataError):
    """No normalizer registered for the requested entity"""
    pass


class NormalizerContractError(FieldMetadataError):
    """Registered class does not extend the Normalizer base class"""
    pass


class WidgetContextError(FieldMetadataError):
    """No widget mapping registered for the requested context"""
    pass


class CrmApiError(FieldMetadataError):
    """Error calling the CRM API"""
    pass


class CrmRecordNotFoundError(CrmApiError):
    """CRM API lookup matched no record"""
    pass
