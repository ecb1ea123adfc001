"""Unattended Garmin Connect login for the nightly risk check.

Saved garth tokens are preferred; the account credentials are only used when
the tokens are missing or no longer accepted.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from garminconnect import Garmin

from garmin_client.exceptions import GarminAuthError, GarminMFARequired

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_DIR = Path("~/.garminconnect").expanduser()
TOKEN_FILE = "oauth1_token.json"

_MFA_MARKERS = ("mfa", "verification", "two-factor")


def has_saved_tokens(token_dir: Path | str) -> bool:
    return (Path(token_dir) / TOKEN_FILE).exists()


def resume_session(
    token_dir: Path | str = DEFAULT_TOKEN_DIR,
    email: str | None = None,
    password: str | None = None,
) -> Garmin:
    """Log in with the tokens saved under *token_dir*.

    Raises:
        GarminAuthError: if there are no tokens or Garmin rejects them.
    """
    token_dir = Path(token_dir)
    if not has_saved_tokens(token_dir):
        raise GarminAuthError(f"No saved tokens at {token_dir}")

    garmin = Garmin(email=email, password=password) if email else Garmin()
    try:
        garmin.login(tokenstore=str(token_dir))
    except Exception as exc:
        raise GarminAuthError(f"Token resume failed: {exc}") from exc
    logger.debug("Resumed Garmin session from %s", token_dir)
    return garmin


def create_session(
    email: str,
    password: str,
    token_dir: Path | str = DEFAULT_TOKEN_DIR,
    prompt_mfa: Optional[Callable[[], str]] = None,
) -> Garmin:
    """Return an authenticated Garmin session, refreshing the saved tokens.

    Parameters
    ----------
    email, password : str
        Garmin Connect credentials, used only when token resume fails.
    token_dir : Path | str
        Directory where garth tokens are persisted. Created if missing.
    prompt_mfa : callable, optional
        Returns an MFA code. Without it an account that needs MFA raises
        ``GarminMFARequired`` rather than blocking the nightly job.
    """
    token_dir = Path(token_dir)
    token_dir.mkdir(parents=True, exist_ok=True)

    if has_saved_tokens(token_dir):
        try:
            garmin = resume_session(token_dir, email, password)
        except GarminAuthError as exc:
            logger.info("%s, falling back to SSO login", exc)
        else:
            _save_tokens(garmin, token_dir)
            return garmin

    garmin = Garmin(email=email, password=password, prompt_mfa=prompt_mfa)
    try:
        garmin.login()
    except Exception as exc:
        raise _login_error(exc) from exc

    _save_tokens(garmin, token_dir)
    logger.info("Logged in to Garmin Connect, tokens saved to %s", token_dir)
    return garmin


def _save_tokens(garmin: Garmin, token_dir: Path) -> None:
    garmin.garth.dump(str(token_dir))


def _login_error(exc: Exception) -> GarminAuthError:
    message = str(exc)
    if any(marker in message.lower() for marker in _MFA_MARKERS):
        return GarminMFARequired(message)
    return GarminAuthError(f"Login failed: {message}")
