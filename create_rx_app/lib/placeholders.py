from __future__ import annotations

import re
import uuid
from typing import Dict, Mapping, Optional

from jinja2 import Environment

PlaceholderMap = Mapping[str, str]

# Template files are JSX/Java/XML, never HTML to be escaped. Only {{ var }}
# and mustache comments {{! ... }} are syntax; {% and {# stay literal text.
_env = Environment(
    autoescape=False,
    keep_trailing_newline=True,
    block_start_string="<%create-rx-app",
    block_end_string="create-rx-app%>",
    comment_start_string="{{!",
    comment_end_string="}}",
)
_envs = {nl: _env.overlay(newline_sequence=nl) for nl in ("\n", "\r\n")}


def project_patterns(project_name: str) -> Dict[str, str]:
    return {
        "DisplayName": project_name,
        "ProjectTemplate": project_name,
        "projecttemplate": project_name.lower(),
    }


def path_patterns(project_name: str, renames: Mapping[str, str]) -> Dict[str, str]:
    return {**project_patterns(project_name), **renames}


def content_patterns(
    project_name: str,
    *,
    current_user: str,
    certificate_thumbprint: Optional[str] = None,
) -> Dict[str, str]:
    patterns = dict(project_patterns(project_name))
    if certificate_thumbprint:
        patterns["certificateThumbprint"] = certificate_thumbprint
    patterns["currentUser"] = current_user
    patterns["packageGuid"] = str(uuid.uuid4())
    patterns["projectGuid"] = str(uuid.uuid4())
    return patterns


def ordered_keys(patterns: PlaceholderMap) -> list[str]:
    """Longest key first; equal lengths keep mapping order."""

    return sorted(patterns, key=len, reverse=True)


def apply_path_patterns(text: str, patterns: PlaceholderMap) -> str:
    """Replace every match of every key (a regular expression) in text."""

    for key in ordered_keys(patterns):
        text = re.sub(key, lambda _m, v=patterns[key]: v, text)
    return text


def render_content(text: str, patterns: PlaceholderMap) -> str:
    """Render {{ key }} placeholders once. Unknown keys render empty.

    Line endings follow the text: CRLF files stay CRLF.
    """

    env = _envs["\r\n" if "\r\n" in text else "\n"]
    return env.from_string(text).render(dict(patterns))
