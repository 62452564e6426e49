"""
Rehash decisions for stored hashes.

A stored hash is due for an upgrade when its time or memory cost is below
the target. Parallelism and key length never trigger a rehash.
"""

from passkeeper.core.logging import get_logger
from passkeeper.hashing.codec import decode_hash
from passkeeper.hashing.params import Parameters
from passkeeper.hashing.password import generate_from_password, verify_password

logger = get_logger(__name__)


def _resolve_target(target: Parameters | None) -> Parameters:
    if target is None:
        # Settings import the parameter bounds, so resolve them lazily
        from passkeeper.config import get_settings

        return get_settings().target_params
    return target


def is_weaker(stored: Parameters, target: Parameters) -> bool:
    """True if ``stored`` falls behind ``target`` in time or memory."""
    return stored.time < target.time or stored.memory < target.memory


def needs_rehash(encoded: str | bytes, target: Parameters | None = None) -> bool:
    """
    Check if a hash was generated with weaker parameters than the target.

    Args:
        encoded: Stored hash.
        target: Desired parameters. Defaults to the configured policy target.

    Returns:
        True if the hash should be regenerated with ``target``.

    Raises:
        HashDecodeError: The stored hash cannot be decoded.
    """
    stored = decode_hash(encoded).params
    return is_weaker(stored, _resolve_target(target))


def verify_and_update(
    encoded: str | bytes,
    password: str | bytes,
    target: Parameters | None = None,
) -> tuple[bool, str | None]:
    """
    Verify a password and produce an upgraded hash when the policy asks for one.

    The plaintext is only available at login, which makes this the moment to
    rehash. The caller persists the new hash.

    Args:
        encoded: Stored hash.
        password: Plain text password from the login attempt.
        target: Desired parameters. Defaults to the configured policy target.

    Returns:
        ``(matched, new_hash)``. ``new_hash`` is None unless the password
        matched and the stored hash is weaker than ``target``.
    """
    if not verify_password(encoded, password):
        return False, None

    target = _resolve_target(target)
    if not needs_rehash(encoded, target):
        return True, None

    logger.info(
        "Upgrading password hash parameters",
        data={"time": target.time, "memory": target.memory},
    )
    return True, generate_from_password(password, target)
