"""Named DigitalOcean API operations.

``DigitalOcean`` is the public entry point: one method per API call,
grouped by resource family. Plain REST calls are delegated to
``ResourceOperation`` instances; nested sub-resources and droplet action
triggers go through ``DigitalOceanClient.call`` directly.
"""

import os
from typing import Any

import structlog

from . import config as config_module
from . import credentials
from .client import DigitalOceanClient
from .operations import make_operation
from .types import DropletActionType, Params, Result

logger = structlog.get_logger(__name__)

KEYS_RESOURCE = "account/keys"


def _droplet_action(action_type: DropletActionType, doc: str):
    def trigger(self: "DigitalOcean", token: str, droplet_id: Any) -> Result:
        return self.droplet_action(token, droplet_id, action_type)

    trigger.__name__ = f"{action_type.value}_droplet"
    trigger.__qualname__ = f"DigitalOcean.{trigger.__name__}"
    trigger.__doc__ = doc
    return trigger


class DigitalOcean:
    """Catalog of DigitalOcean v2 API operations.

    Every method takes the API token as its first argument and returns the
    parsed JSON response (see ``DigitalOceanClient.execute``).
    """

    def __init__(self, client: DigitalOceanClient | None = None):
        self.client = client or DigitalOceanClient()

        self._actions = make_operation(self.client, "GET", "actions")

        self._domains = make_operation(self.client, "GET", "domains")
        self._create_domain = make_operation(self.client, "POST", "domains")
        self._destroy_domain = make_operation(self.client, "DELETE", "domains")

        self._droplets = make_operation(self.client, "GET", "droplets")
        self._create_droplet = make_operation(self.client, "POST", "droplets")
        self._destroy_droplet = make_operation(self.client, "DELETE", "droplets")

        self._images = make_operation(self.client, "GET", "images")

        self._keys = make_operation(self.client, "GET", KEYS_RESOURCE)
        self._create_key = make_operation(self.client, "POST", KEYS_RESOURCE)
        self._update_key = make_operation(self.client, "PUT", KEYS_RESOURCE)
        self._destroy_key = make_operation(self.client, "DELETE", KEYS_RESOURCE)

        self._regions = make_operation(self.client, "GET", "regions")
        self._sizes = make_operation(self.client, "GET", "sizes")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.client.close()

    def load_token(self) -> str:
        """Load the API token from the configured token file or environment."""
        return credentials.load_token(self.client.config.token_file)

    # Actions

    def actions(self, token: str) -> Result:
        """List all actions that have been executed on the current account."""
        return self._actions.list(token)

    def get_action(self, token: str, action_id: Any) -> Result:
        """Get a single action."""
        return self._actions.by_id(token, action_id)

    # Domains

    def domains(self, token: str) -> Result:
        """Fetch all domains."""
        return self._domains.list(token)

    def get_domain(self, token: str, name: str) -> Result:
        """Get a single domain by name."""
        return self._domains.by_id(token, name)

    def create_domain(
        self,
        token: str,
        params: Params | None = None,
        **kwargs: Any,
    ) -> Result:
        """Create a domain, e.g. ``name="example.com", ip_address="1.2.3.4"``."""
        return self._create_domain.create(token, params, **kwargs)

    def destroy_domain(self, token: str, name: str) -> Result:
        """Delete a domain."""
        return self._destroy_domain.by_id(token, name)

    def records(self, token: str, domain: str) -> Result:
        """Return all records for a domain."""
        return self.client.call("GET", "domains", token, domain, "records")

    # Droplets

    def droplets(self, token: str) -> Result:
        """Get all droplets."""
        return self._droplets.list(token)

    def get_droplet(self, token: str, droplet_id: Any) -> Result:
        """Get a single droplet by ID."""
        return self._droplets.by_id(token, droplet_id)

    def create_droplet(
        self,
        token: str,
        params: Params | None = None,
        **kwargs: Any,
    ) -> Result:
        """Create a new droplet.

        Parameters are sent as-is, e.g. ``name``, ``region``, ``size`` and
        ``image``.
        """
        return self._create_droplet.create(token, params, **kwargs)

    def destroy_droplet(self, token: str, droplet_id: Any) -> Result:
        """Delete a droplet."""
        return self._destroy_droplet.by_id(token, droplet_id)

    def get_droplet_kernels(self, token: str, droplet_id: Any) -> Result:
        """Retrieve a list of all kernels available to a droplet."""
        return self.client.call("GET", "droplets", token, droplet_id, "kernels")

    def get_droplet_snapshots(self, token: str, droplet_id: Any) -> Result:
        """Retrieve the snapshots that have been created from a droplet."""
        return self.client.call("GET", "droplets", token, droplet_id, "snapshots")

    def get_droplet_backups(self, token: str, droplet_id: Any) -> Result:
        """Retrieve any backups associated with a droplet."""
        return self.client.call("GET", "droplets", token, droplet_id, "backups")

    def get_droplet_actions(self, token: str, droplet_id: Any) -> Result:
        """Retrieve all actions that have been executed on a droplet."""
        return self.client.call("GET", "droplets", token, droplet_id, "actions")

    # Droplet actions

    def droplet_action(
        self,
        token: str,
        droplet_id: Any,
        action_type: DropletActionType | str,
        **params: Any,
    ) -> Result:
        """Trigger an action on a droplet.

        Extra keyword arguments are added to the request body next to
        ``type``, for actions that take arguments.
        """
        if isinstance(action_type, DropletActionType):
            action = action_type.value
        else:
            action = action_type
        logger.info("Triggering droplet action", droplet_id=droplet_id, action=action)
        return self.client.call(
            "POST",
            "droplets",
            token,
            droplet_id,
            "actions",
            params={"type": action, **params},
        )

    reboot_droplet = _droplet_action(DropletActionType.REBOOT, "Reboot a droplet.")
    power_cycle_droplet = _droplet_action(
        DropletActionType.POWER_CYCLE,
        "Power cycle a droplet (power off and then back on).",
    )
    shutdown_droplet = _droplet_action(
        DropletActionType.SHUTDOWN,
        "Shutdown a droplet. A shutdown action is an attempt to shutdown the "
        "droplet in a graceful way.",
    )
    power_off_droplet = _droplet_action(
        DropletActionType.POWER_OFF,
        "Power off a droplet. A power off is a hard shutdown and should only "
        "be used if the shutdown action is not successful.",
    )
    power_on_droplet = _droplet_action(
        DropletActionType.POWER_ON,
        "Power on a droplet.",
    )
    password_reset_droplet = _droplet_action(
        DropletActionType.PASSWORD_RESET,
        "Reset the root password for a droplet.",
    )

    # Images

    def images(self, token: str) -> Result:
        """Return all images."""
        return self._images.list(token)

    def get_image(self, token: str, image_id: Any) -> Result:
        """Get a single image by ID or slug."""
        return self._images.by_id(token, image_id)

    # SSH keys

    def ssh_keys(self, token: str) -> Result:
        """Get all account SSH keys."""
        return self._keys.list(token)

    def get_key(self, token: str, key_id: Any) -> Result:
        """Get a single SSH key by ID or fingerprint."""
        return self._keys.by_id(token, key_id)

    def create_key(
        self,
        token: str,
        params: Params | None = None,
        **kwargs: Any,
    ) -> Result:
        """Create a new SSH key from ``name`` and ``public_key``."""
        return self._create_key.create(token, params, **kwargs)

    def update_key(
        self,
        token: str,
        key_id: Any,
        params: Params | None = None,
        **kwargs: Any,
    ) -> Result:
        """Update the name of an SSH key."""
        return self._update_key.by_id(token, key_id, params, **kwargs)

    def destroy_key(self, token: str, key_id: Any) -> Result:
        """Destroy a public SSH key that you have in your account."""
        return self._destroy_key.by_id(token, key_id)

    # Regions and sizes

    def regions(self, token: str) -> Result:
        """Return all DigitalOcean regions."""
        return self._regions.list(token)

    def sizes(self, token: str) -> Result:
        """Return the available droplet sizes."""
        return self._sizes.list(token)


def create_api(
    config_path: str | None = None,
    setup_logging: bool = False,
) -> DigitalOcean:
    """Create the API facade using a config path or environment default.

    Without a config path and without ``DIGITALOCEAN_CONFIG_PATH`` set, the
    default configuration is used. Global structlog configuration is left to
    the application unless ``setup_logging`` is true.
    """
    resolved_path = config_path or os.environ.get(config_module.CONFIG_ENV_VAR)
    if resolved_path:
        config = config_module.load_config(resolved_path)
    else:
        config = config_module.ClientConfig()
    if setup_logging:
        config_module.configure_logging(config.log_level)

    client = DigitalOceanClient(config)
    logger.info("Created DigitalOcean client", endpoint=config.endpoint)
    return DigitalOcean(client)
