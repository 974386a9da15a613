"""Configuration constants for the property catalog."""

import os

# Optional: set via environment or .env
PROPERTIES_API_URL = os.environ.get(
    "PROPERTIES_API_URL", "http://localhost:3001/properties"
)
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", 10))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = os.environ.get("LOG_FORMAT", "standard")
PORT = int(os.environ.get("PORT", 8000))

# defaults applied to new listings before they are submitted
DEFAULT_SQFT = 1000
PLACEHOLDER_IMAGE = "https://images.pexels.com/photos/1396122/pexels-photo-1396122.jpeg?auto=compress&cs=tinysrgb&w=800"

# choices offered by the add-property form
PROPERTY_TYPES = ["House", "Plot", "Shed", "Retail Store"]
