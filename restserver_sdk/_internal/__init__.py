"""Internal modules for the RestServer SDK.

WARNING: These modules back RestServerClient and are not intended for
direct use in application code.

Modules:
    namespace - Dict merge and dotted-path resolution
    querystring - Canonical query-string encoding
    signing - Request signing
    session - Current-session holder
    pending - One-shot request correlation
    redaction - Masking of credentials in log output
    debug - Debug logging and event hook
    http - Shared HTTP client configuration
    transports - Script-tag, server-side HTTP and plugin-bridge transports
"""
