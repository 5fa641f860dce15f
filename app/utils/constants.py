class ResponseMessages:
    """Standard API response messages"""

    WEDDING_NOT_FOUND = "Wedding not found"
    GUEST_NOT_FOUND = "Guest not found"
    CATEGORY_NOT_FOUND = "Category not found"
    NO_FILE_UPLOADED = "No file uploaded"
    UNEXPECTED_ERROR = "An unexpected error occurred"


# Application Constants
class AppConstants:
    # File Upload
    MAX_UPLOAD_SIZE_MB = 5
    ALLOWED_UPLOAD_EXTENSIONS = [".csv"]

    # Guests
    MIN_GUEST_COUNT = 1
    MAX_GUEST_COUNT = 20

    # Categories
    DEFAULT_CATEGORY_COLOR = "#D4AF37"
    DEFAULT_GUEST_CATEGORIES = [
        {"name": "Wedding Party", "color": "#9333EA"},
        {"name": "Family", "color": "#DC2626"},
        {"name": "Friends", "color": "#2563EB"},
        {"name": "Colleagues", "color": "#059669"},
    ]

    # CORS
    DEFAULT_CORS_ORIGINS = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:5000",
    ]
