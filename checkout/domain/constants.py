BOOKING_UNIT_TYPES = ("day",)
BOOKING_DATE_FORMAT = "%Y-%m-%d"

CONTRACT_AGREED_MARKER = "1"

PAYMENT_GATEWAY_PAYPAL = "paypal"
PAYMENT_PROCESS_PREAUTHORIZE = "preauthorize"

# Days a preauthorization stays valid before the gateway voids it
AUTHORIZATION_EXPIRATION_DAYS = {
    PAYMENT_GATEWAY_PAYPAL: 3,
}

LISTING_PRIVACY_PUBLIC = "public"

NAME_DISPLAY_FULL_NAME = "full_name"
NAME_DISPLAY_FIRST_NAME_ONLY = "first_name_only"
NAME_DISPLAY_FIRST_NAME_WITH_INITIAL = "first_name_with_initial"
