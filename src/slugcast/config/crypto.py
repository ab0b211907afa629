"""Encryption of stored Cloudflare credentials using Fernet."""

import stat
from pathlib import Path

from cryptography.fernet import Fernet, InvalidToken
from pydantic import SecretStr

from slugcast.utils.errors import EncryptionError

# Group/other permission bits that must not be set on the key file
_OPEN_BITS = stat.S_IRGRP | stat.S_IROTH | stat.S_IWGRP | stat.S_IWOTH


class SecretCipher:
    """Encrypts secrets with a Fernet key kept next to the config files.

    The key is generated lazily on first use and written with 0600
    permissions. A key file readable by group or others is refused.
    """

    def __init__(self, key_path: Path) -> None:
        self.key_path = key_path
        self._fernet: Fernet | None = None

    def _load_key(self) -> bytes:
        if self.key_path.exists():
            mode = stat.S_IMODE(self.key_path.stat().st_mode)
            if mode & _OPEN_BITS:
                raise EncryptionError(
                    f"Key file {self.key_path} has insecure permissions ({oct(mode)}). "
                    f"Run: chmod 600 {self.key_path}"
                )
            return self.key_path.read_bytes()

        key = Fernet.generate_key()
        self.key_path.parent.mkdir(parents=True, exist_ok=True)
        self.key_path.write_bytes(key)
        self.key_path.chmod(0o600)
        return key

    @property
    def fernet(self) -> Fernet:
        if self._fernet is None:
            self._fernet = Fernet(self._load_key())
        return self._fernet

    def encrypt(self, secret: SecretStr | None) -> str:
        """Encrypt a secret into a printable token ("" for an empty secret).

        Raises:
            EncryptionError: If encryption fails
        """
        if secret is None or not secret.get_secret_value():
            return ""

        try:
            token = self.fernet.encrypt(secret.get_secret_value().encode("utf-8"))
        except (OSError, ValueError) as e:
            raise EncryptionError(f"Failed to encrypt credential: {e}") from e
        return token.decode("utf-8")

    def decrypt(self, token: str | None) -> SecretStr | None:
        """Decrypt a stored token back into a secret.

        Raises:
            EncryptionError: If the token was not produced with this key
        """
        if not token:
            return None

        try:
            plaintext = self.fernet.decrypt(token.encode("utf-8"))
        except InvalidToken as e:
            raise EncryptionError(
                f"Failed to decrypt credential; was {self.key_path} replaced?"
            ) from e
        return SecretStr(plaintext.decode("utf-8"))
