from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Booking service business metrics

    Scraped from /metrics; results are labelled so conflict and failure
    rates can be alerted on separately from traffic volume.
    """

    def __init__(self) -> None:
        # ========== Booking Metrics ==========
        self.booking_requests = Counter(
            'booking_requests_total',
            'Total booking requests',
            ['operation', 'result'],  # operation: create/delete, result: success/conflict/...
        )

        self.booking_duration = Histogram(
            'booking_duration_seconds',
            'Booking transaction duration',
            ['operation'],
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

        self.seats_booked = Counter(
            'booking_seats_booked_total',
            'Seats marked occupied by successful bookings',
        )

        self.seats_released = Counter(
            'booking_seats_released_total',
            'Seats released by deleted bookings',
        )

        # ========== Payment Metrics ==========
        self.checkout_sessions = Counter(
            'checkout_sessions_total',
            'Checkout sessions requested from the payment processor',
            ['result'],
        )

        self.checkout_duration = Histogram(
            'checkout_session_duration_seconds',
            'Payment processor round trip',
            buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
        )

    # ========== Helper Methods ==========

    def record_booking(self, *, operation: str, result: str, duration: float) -> None:
        self.booking_requests.labels(operation=operation, result=result).inc()
        self.booking_duration.labels(operation=operation).observe(duration)

    def record_seats_booked(self, count: int) -> None:
        self.seats_booked.inc(count)

    def record_seats_released(self, count: int) -> None:
        self.seats_released.inc(count)

    def record_checkout(self, *, result: str, duration: float) -> None:
        self.checkout_sessions.labels(result=result).inc()
        self.checkout_duration.observe(duration)


# Global metrics instance
metrics = BookingMetrics()
