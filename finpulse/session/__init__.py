"""Login session package."""

from finpulse.session.gate import AuthenticationFailure, SessionGate

__all__ = ["AuthenticationFailure", "SessionGate"]
