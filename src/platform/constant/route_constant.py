API_BASE = '/api'

# Catalog
MOVIE_BASE = f'{API_BASE}/movie'
CAST_BASE = f'{API_BASE}/cast'
SHOW_BASE = f'{API_BASE}/show'
TIME_SLOT_BASE = f'{API_BASE}/time'

# Booking
BOOKING_BASE = f'{API_BASE}/booking'

# Payment
PAYMENT_BASE = f'{API_BASE}/payment'
CHECKOUT_SESSION = '/checkout-session'
