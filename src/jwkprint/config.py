import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("JWKPRINT_LOG_LEVEL", "INFO").upper()

# Directory holding public.key / cert.pem / cert.key test resources
FIXTURE_DIR = os.getenv(
    "JWKPRINT_FIXTURE_DIR",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "testing", "resources"),
)

# Default modulus size for `jwkprint generate`
KEY_SIZE = int(os.getenv("JWKPRINT_KEY_SIZE", "2048"))
