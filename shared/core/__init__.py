import os

from dotenv import load_dotenv

# local | development | testing | staging | production
ENVIRONMENT = os.getenv("ENVIRONMENT", "local").lower()

env_file = f".env.{ENVIRONMENT}"
if os.path.exists(env_file):
    load_dotenv(dotenv_path=env_file)

__all__ = ["ENVIRONMENT"]
