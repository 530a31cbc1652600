# API Route Constants

# Health
PING = '/ping'

# User routes
USER_BASE = '/users'

# Vehicle routes
VEHICLE_BASE = '/vehicles'

# Slot routes
SLOT_BASE = '/slots'

# Reservation routes
RESERVATION_LIST = '/reservations'
RESERVATION_CANCEL = '/reservations/{res_id}'
RESERVE = '/reserve'
COMPLETE = '/complete'

# Payment routes
PAYMENT_BASE = '/payments'
