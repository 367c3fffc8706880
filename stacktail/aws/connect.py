"""
Creation of the boto3 clients used to talk to CloudFormation.
"""
import logging
import threading
from typing import Optional

from boto3.session import Session
from botocore.client import BaseClient
from botocore.config import Config
from botocore.exceptions import ProfileNotFound

from stacktail.constants import AWS_REGION_US_EAST_1, VERSION
from stacktail.exceptions import ConfigurationError

LOG = logging.getLogger(__name__)


class ClientFactory:
    """
    Factory to build AWS clients from the credential options of the command line.

    Credentials are resolved the same way the AWS CLI resolves them: a named profile wins over an explicit
    key/secret pair, and if neither is given the default chain (environment variables, ~/.aws/credentials,
    instance metadata, ...) applies. Clients are cached per service name.
    """

    def __init__(
        self,
        region_name: Optional[str] = None,
        profile_name: Optional[str] = None,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        config: Config = None,
    ):
        """
        :param region_name: the region the stack lives in. Falls back to the session default, then us-east-1.
        :param profile_name: name of a profile in ~/.aws/credentials
        :param aws_access_key_id: access key, ignored if a profile is given
        :param aws_secret_access_key: secret key, ignored if a profile is given
        :param endpoint_url: custom endpoint, e.g., of a local cloud emulator
        :param config: botocore config used for client creation
        """
        self._region_name = region_name
        self._profile_name = profile_name
        self._aws_access_key_id = aws_access_key_id
        self._aws_secret_access_key = aws_secret_access_key
        self._endpoint_url = endpoint_url
        self._config: Config = config or Config(user_agent_extra=f"stacktail/{VERSION}")

        self._session: Optional[Session] = None
        self._clients = {}
        self._create_client_lock = threading.RLock()

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = self._create_session()
        return self._session

    def _create_session(self) -> Session:
        try:
            if self._profile_name:
                if self._aws_access_key_id or self._aws_secret_access_key:
                    LOG.debug("Profile %s given, ignoring key/secret", self._profile_name)
                return Session(profile_name=self._profile_name, region_name=self._region_name)

            return Session(
                aws_access_key_id=self._aws_access_key_id,
                aws_secret_access_key=self._aws_secret_access_key,
                region_name=self._region_name,
            )
        except ProfileNotFound as e:
            raise ConfigurationError(str(e)) from e

    @property
    def region_name(self) -> str:
        return self._region_name or self.session.region_name or AWS_REGION_US_EAST_1

    def get_client(self, service_name: str) -> BaseClient:
        with self._create_client_lock:
            if service_name not in self._clients:
                self._clients[service_name] = self._create_client(service_name)
            return self._clients[service_name]

    def _create_client(self, service_name: str) -> BaseClient:
        try:
            region_name = self.region_name
            LOG.debug(
                "Creating %s client for region %s (endpoint: %s)",
                service_name,
                region_name,
                self._endpoint_url or "default",
            )
            return self.session.client(
                service_name=service_name,
                region_name=region_name,
                endpoint_url=self._endpoint_url,
                config=self._config,
            )
        except ProfileNotFound as e:
            raise ConfigurationError(str(e)) from e

    @property
    def cloudformation(self) -> BaseClient:
        return self.get_client("cloudformation")
