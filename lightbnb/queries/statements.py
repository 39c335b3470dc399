"""Fixed parameterized statements for users, reservations and property inserts."""

USER_BY_EMAIL = """
SELECT *
FROM users
WHERE email = $1;
"""

USER_BY_ID = """
SELECT *
FROM users
WHERE id = $1;
"""

INSERT_USER = """
INSERT INTO users (name, email, password)
VALUES ($1, $2, $3)
RETURNING *;
"""

RESERVATIONS_FOR_GUEST = """
SELECT
  reservations.id AS reservation_id,
  reservations.start_date,
  reservations.end_date,
  reservations.guest_id,
  properties.*,
  avg(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
LEFT JOIN property_reviews ON property_reviews.property_id = properties.id
WHERE reservations.guest_id = $1
GROUP BY reservations.id, properties.id
ORDER BY reservations.start_date DESC
LIMIT $2;
"""

PROPERTY_COLUMNS = (
    "title",
    "description",
    "owner_id",
    "cover_photo_url",
    "thumbnail_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "province",
    "city",
    "country",
    "street",
    "post_code",
)

_COLUMN_LIST = ", ".join(PROPERTY_COLUMNS)
_PLACEHOLDERS = ", ".join(f"${i}" for i in range(1, len(PROPERTY_COLUMNS) + 1))

INSERT_PROPERTY = f"""
INSERT INTO properties ({_COLUMN_LIST})
VALUES ({_PLACEHOLDERS})
RETURNING *;
"""
