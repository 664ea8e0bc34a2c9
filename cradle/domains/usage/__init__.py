"""Usage domain: daily quota checks, the usage ledger and usage reports.

Use Inject(UsageLimitCheckerProtocol) in FastAPI endpoints for the singleton checker.
Use Inject(UsageLedgerProtocol) to record a chargeable action after it succeeded.
Use require_quota(LimitType.MESSAGE) as a route dependency to answer 429 when denied.
"""
