"""create-rx-app: ReactXP project generator (Python-first, step-driven).

Core design goals:
- One synchronous pass, no resume
- Explicit state threaded through steps
- Injectable command runner for npm and PowerShell
- Centralized logging, colored console output
"""

__all__ = []
