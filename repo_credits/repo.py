# repo_credits/repo.py
"""
Repository metadata for the credits.

Everything here is best effort: a missing `git` or `gh`, a repository
without commits, or no network just leaves the matching field empty.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)

PLACEHOLDER_DESCRIPTION = (
    "Unnamed repository; edit this file 'description' to name the repository."
)
MAX_HIGHLIGHTS = 8
HIGHLIGHT_SCAN = 50
HIGHLIGHT_PREFIXES = ("feat:", "fix:")

Runner = Callable[[Sequence[str], Path], Optional[str]]


@dataclass
class Contributor:
    name: str
    commits: int


@dataclass
class RepoInfo:
    name: str = ""
    description: str = ""
    total_commits: int = 0
    contributors: List[Contributor] = field(default_factory=list)
    highlights: List[str] = field(default_factory=list)
    stars: int = 0
    license: str = ""
    language: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def run_command(cmd: Sequence[str], cwd: Path) -> Optional[str]:
    """Run `cmd` and return its stdout, or None if it could not run or failed."""
    try:
        proc = subprocess.run(
            list(cmd),
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            timeout=15,
        )
    except FileNotFoundError:
        logger.debug("%s not installed", cmd[0])
        return None
    except OSError as exc:
        logger.debug("%s could not start in %s: %s", cmd[0], cwd, exc)
        return None
    except subprocess.CalledProcessError as exc:
        logger.debug("%s exited %s: %s", " ".join(cmd), exc.returncode, (exc.stderr or "").strip())
        return None
    except subprocess.TimeoutExpired:
        logger.debug("%s timed out", " ".join(cmd))
        return None
    return proc.stdout


def _to_int(text: Optional[str]) -> int:
    try:
        return int((text or "").strip())
    except ValueError:
        return 0


def parse_shortlog(output: str) -> List[Contributor]:
    """Parse `git shortlog -sn` output, most commits first."""
    contributors = []
    for line in output.strip().splitlines():
        line = line.strip()
        if not line:
            continue
        count, sep, name = line.partition("\t")
        if not sep:
            continue
        contributors.append(Contributor(name=name.strip(), commits=_to_int(count)))
    contributors.sort(key=lambda c: c.commits, reverse=True)
    return contributors


def parse_highlights(output: str, limit: int = MAX_HIGHLIGHTS) -> List[str]:
    """Pick feature and fix subjects out of a `git log --format=%s` listing."""
    highlights: List[str] = []
    for line in output.strip().splitlines():
        line = line.strip()
        if not line.startswith(HIGHLIGHT_PREFIXES):
            continue
        for prefix in HIGHLIGHT_PREFIXES:
            if line.startswith(prefix + " "):
                line = line[len(prefix) + 1:]
                break
        highlights.append(line)
        if len(highlights) >= limit:
            break
    return highlights


def _read_description(path: Path) -> str:
    try:
        text = (path / ".git" / "description").read_text(encoding="utf-8").strip()
    except OSError:
        return ""
    return "" if text == PLACEHOLDER_DESCRIPTION else text


def collect_repo_info(path: Optional[Path] = None, run: Runner = run_command) -> RepoInfo:
    path = (path or Path.cwd()).resolve()
    info = RepoInfo(name=path.name)

    def gh_field(json_field: str, query: str) -> str:
        out = run(["gh", "repo", "view", "--json", json_field, "-q", query], path)
        return (out or "").strip()

    info.description = _read_description(path) or gh_field("description", ".description")
    info.total_commits = _to_int(run(["git", "rev-list", "--count", "HEAD"], path))

    shortlog = run(["git", "shortlog", "-sn", "--no-merges", "HEAD"], path)
    if shortlog:
        info.contributors = parse_shortlog(shortlog)

    log = run(
        ["git", "log", "--oneline", "--no-merges", f"-{HIGHLIGHT_SCAN}", "--format=%s"], path
    )
    if log:
        info.highlights = parse_highlights(log)

    info.stars = _to_int(gh_field("stargazerCount", ".stargazerCount"))
    info.license = gh_field("licenseInfo", ".licenseInfo.name")
    info.language = gh_field("primaryLanguage", ".primaryLanguage.name")

    logger.debug(
        "collected %s: %d commits, %d contributors, %d highlights",
        info.name, info.total_commits, len(info.contributors), len(info.highlights),
    )
    return info
