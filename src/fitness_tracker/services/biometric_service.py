"""
Biometric authentication service.

Wraps the platform authenticator's single asynchronous prompt and collapses
its outcome (succeeded, error, cancelled) to a boolean.
"""

import logging
from concurrent.futures import CancelledError
from concurrent.futures import TimeoutError as PromptTimeoutError

from ..adapters import BiometricAuthenticator
from ..exceptions import UnsupportedError
from ..models import AuthOutcome
from ..settings import Settings

logger = logging.getLogger(__name__)


class BiometricService:
    """Support check and prompt-based authentication."""

    def __init__(self, authenticator: BiometricAuthenticator, settings: Settings):
        """
        Initialize the service.

        Args:
            authenticator: Platform biometric authenticator
            settings: Application settings containing the prompt text
        """
        self.authenticator = authenticator
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    def check_biometric_support(self) -> bool:
        """Whether strong biometrics are available and enrolled."""
        return self.authenticator.can_authenticate()

    def require_support(self) -> None:
        """
        Raise if biometrics cannot be used.

        Raises:
            UnsupportedError: If no biometric hardware or enrollment exists
        """
        if not self.check_biometric_support():
            raise UnsupportedError("Biometric authentication is not available")

    def authenticate(self, timeout: float | None = None) -> bool:
        """
        Show the biometric prompt and wait for it to resolve.

        Args:
            timeout: Seconds to wait for the prompt; None waits indefinitely

        Returns:
            True only if the user authenticated successfully; a timeout,
            a cancelled prompt or a prompt error all yield False
        """
        if not self.check_biometric_support():
            self.logger.warning("Biometric authentication requested but unsupported")
            return False

        future = self.authenticator.authenticate(self.settings.biometric)
        try:
            outcome = future.result(timeout=timeout)
        except PromptTimeoutError:
            future.cancel()
            self.logger.warning(f"Biometric prompt timed out after {timeout}s")
            return False
        except CancelledError:
            self.logger.info("Biometric prompt was cancelled")
            return False
        except Exception as e:
            self.logger.error(f"Biometric prompt failed: {e}")
            return False

        self.logger.info(f"Biometric prompt resolved: {outcome.value}")
        return outcome is AuthOutcome.SUCCEEDED
