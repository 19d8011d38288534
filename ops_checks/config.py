import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    OPS_CHECKS_LOG_LEVEL: str = os.getenv("OPS_CHECKS_LOG_LEVEL", "WARNING").upper()
    # Kept as a string: argparse converts it like a command-line value, so a
    # bad value is a usage error rather than an import-time crash.
    OPS_CHECKS_EVENTSTORE_TIMEOUT: str = os.getenv("OPS_CHECKS_EVENTSTORE_TIMEOUT", "15")
    JENKINS_SERVER: str = os.getenv("JENKINS_SERVER", "localhost")
    JENKINS_PORT: str = os.getenv("JENKINS_PORT", "8000")
    JENKINS_METRICS_TOKEN: str = os.getenv("JENKINS_METRICS_TOKEN", "")


settings = Settings()
