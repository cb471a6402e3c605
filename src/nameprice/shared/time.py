"""
Time Constants - Durations in Whole Seconds

Files that USE this module:
- nameprice.application.premium_service (decay period and grace period)
"""

ONE_MINUTE_IN_SECONDS = 60
ONE_HOUR_IN_SECONDS = 60 * ONE_MINUTE_IN_SECONDS
ONE_DAY_IN_SECONDS = 24 * ONE_HOUR_IN_SECONDS

# Delay between a domain's expiration and its release to the market
GRACE_PERIOD = 90 * ONE_DAY_IN_SECONDS
