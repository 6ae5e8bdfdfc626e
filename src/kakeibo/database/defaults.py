"""Default category set shared by the in-memory backend and ``init-db``."""

# (id, name) pairs; ids are stable and referenced by stored transactions.
DEFAULT_CATEGORIES = [
    (1, "Food"),
    (2, "Transportation"),
    (3, "Housing"),
    (4, "Utilities"),
    (5, "Communication"),
    (6, "Entertainment"),
    (7, "Medical"),
    (8, "Education"),
    (9, "Other"),
    (10, "Salary"),
]
