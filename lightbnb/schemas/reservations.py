from datetime import date

from lightbnb.schemas.properties import PropertyWithRating


class Reservation(PropertyWithRating):
    """A guest's reservation, flattened with the reserved property's columns."""

    reservation_id: int
    start_date: date
    end_date: date
    guest_id: int
