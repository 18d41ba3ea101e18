"""Use-case entry points; import from :mod:`tunekit.api` instead of these modules."""
