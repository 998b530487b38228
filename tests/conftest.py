import os, sys
import warnings
from pathlib import Path

# Add src/ to sys.path for imports without an editable install
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Ensure required environment variables for config validation
os.environ.setdefault("BOT_TOKEN", "test-token")
os.environ.setdefault("BOT_URL", "https://quotes.invalid/quotes.json")

# Silence deprecation warnings surfaced from third-party dependencies during tests
warnings.filterwarnings(
    "ignore", category=DeprecationWarning, module=r"^discord\\.player$"
)
warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)


def pytest_configure(config):
    warnings.filterwarnings(
        "ignore", category=DeprecationWarning, module=r"^discord\\.player$"
    )
    warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)
