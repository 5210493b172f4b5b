class MixMasterError(Exception):
    """Base exception for MixMaster errors"""
    pass

class LookupFailure(MixMasterError):
    """A recipe source lookup failed"""
    pass

class NetworkError(LookupFailure):
    """Network-related errors (timeouts, connection issues, 5xx responses)"""
    pass

class RateLimitError(LookupFailure):
    """The recipe source is throttling requests"""
    pass

class ResponseParseError(LookupFailure):
    """The recipe source returned a payload we cannot read"""
    pass
