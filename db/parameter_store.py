"""
db/parameter_store.py
---------------------
Fetches the database credentials from AWS SSM Parameter Store.

Four SecureString parameters are read in a single GetParameters call:
    <prefix>/host, <prefix>/user, <prefix>/password, <prefix>/name
"""

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from config import AWS_REGION, SSM_PARAMETER_PREFIX, SSM_TIMEOUT_SECONDS
from db.errors import ConfigError
from models.db_config import REQUIRED_FIELDS, DatabaseConfig
from utils.logger import get_logger

logger = get_logger(__name__)


def _default_client():
    return boto3.client(
        "ssm",
        region_name=AWS_REGION,
        config=Config(
            connect_timeout=SSM_TIMEOUT_SECONDS,
            read_timeout=SSM_TIMEOUT_SECONDS,
            retries={"max_attempts": 1},
        ),
    )


class ParameterFetcher:
    """Reads DatabaseConfig values from the Parameter Store. Never retries."""

    def __init__(self, client=None, prefix: str = SSM_PARAMETER_PREFIX):
        self._client = client
        self.prefix = prefix

    @property
    def client(self):
        if self._client is None:
            self._client = _default_client()
        return self._client

    @property
    def parameter_names(self) -> list[str]:
        return [f"{self.prefix}/{key}" for key in REQUIRED_FIELDS]

    def fetch(self) -> DatabaseConfig:
        """
        Fetch and decrypt the database parameters.

        Returns:
            A new DatabaseConfig.

        Raises:
            ConfigError: If the service call fails or any parameter is
                missing or empty.
        """
        try:
            response = self.client.get_parameters(
                Names=self.parameter_names,
                WithDecryption=True,
            )
        except (ClientError, BotoCoreError) as e:
            raise ConfigError(f"Parameter Store request failed: {e}") from e

        # "/myapp/db/host" -> "host"
        values = {
            p["Name"].split("/")[-1]: p.get("Value", "")
            for p in response.get("Parameters", [])
        }
        config = DatabaseConfig.from_mapping(
            {key: values.get(key, "") for key in REQUIRED_FIELDS}
        )

        missing = config.missing_fields()
        if missing:
            raise ConfigError(
                f"Missing DB parameters in Parameter Store: {', '.join(missing)}"
            )

        logger.info(f"Fetched DB parameters for {config.user}@{config.host}/{config.name}")
        return config
