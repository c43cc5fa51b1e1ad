from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from .. import ui
from .command import CommandRunner
from .env import FOLDERS, is_windows

logger = logging.getLogger(__name__)

CERT_PASSWORD = "password"


def certificate_path(project_path: Path, project_name: str) -> Path:
    return project_path / FOLDERS.windows / project_name / f"{project_name}_TemporaryKey.pfx"


def certificate_script(project_path: Path, project_name: str, user: str) -> str:
    """PowerShell that creates, exports and echoes a code-signing certificate."""

    dest_dir = project_path / FOLDERS.windows / project_name
    pfx = certificate_path(project_path, project_name)
    return ";".join(
        [
            "$cert = New-SelfSignedCertificate -KeyUsage DigitalSignature -KeyExportPolicy Exportable "
            f'-Subject "CN={user}" '
            '-TextExtension @("2.5.29.37={text}1.3.6.1.5.5.7.3.3", "2.5.29.19={text}Subject Type:End Entity") '
            '-CertStoreLocation "Cert:\\CurrentUser\\My"',
            f"$pwd = ConvertTo-SecureString -String {CERT_PASSWORD} -Force -AsPlainText",
            f'New-Item -ErrorAction Ignore -ItemType directory -Path "{dest_dir}"',
            'Export-PfxCertificate -Cert "cert:\\CurrentUser\\My\\$($cert.Thumbprint)" '
            f'-FilePath "{pfx}" -Password $pwd',
            "$cert.Thumbprint",
        ]
    )


def build_windows_certificate(
    project_path: Path,
    project_name: str,
    *,
    runner: CommandRunner,
    console: Console,
    platform: str,
    user: str,
) -> str:
    """Generate a self-signed certificate; return its thumbprint or ""."""

    if not is_windows(platform):
        return ""

    ui.heading(console, "[windows] Generating self-signed certificate...")
    (project_path / FOLDERS.windows / project_name).mkdir(parents=True, exist_ok=True)

    r = runner.run(
        ["powershell", "-command", certificate_script(project_path, project_name, user)],
        cwd=str(project_path),
    )
    if r.returncode == 0:
        ui.success(console, "[windows] Self-signed certificate generated successfully.")
        lines = r.stdout.strip().splitlines()
        return lines[-1].strip() if lines else ""

    logger.warning("Certificate generation failed (exit %s): %s", r.returncode, r.stderr.strip())
    ui.warn(console, "[windows] Failed to generate Self-signed certificate")
    return ""
