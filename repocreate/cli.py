"""
cli.py

Responsibility: CLI entrypoint for create-repo.

High-level flow:
1) Ask `gh` whether the remote repository already exists
2) If it does, offer to clone it (and stop) or to keep going with it
3) (Optional) Create or reuse a local directory named after the repository
4) (Optional) Seed the working directory from a template
5) git init, add, commit (allow-empty)
6) gh repo create with the chosen visibility, register `origin`, push

Every failure is raised as an exception; `main` is the only place that turns
errors into messages and exit statuses.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from repocreate.config import ConfigError, load_config
from repocreate.github_client import GitHubClient, GitHubError
from repocreate.prompt import confirm
from repocreate.renderer import RenderError, build_context, seed_repository
from repocreate.shell import CommandError, command_ok, run_command

log = logging.getLogger(__name__)

T = TypeVar("T")

PROG = "create-repo"
DEFAULT_COMMIT_MESSAGE = "ci: create repository"

_TRUE = {"1", "t", "true", "y", "yes", "on"}
_FALSE = {"0", "f", "false", "n", "no", "off"}

EXAMPLES = f"""\
Examples:
  {PROG} -help
  {PROG} -name=myrepo
  {PROG} -name=myrepo -create-dir=true
  {PROG} -name=myrepo -private=true
  {PROG} -name=myrepo -create-dir=true -private=true
  {PROG} -name=myrepo -owner=my-org -ssh

Automates repository creation with Git and GitHub CLI.
"""


class CLIError(RuntimeError):
    pass


class InputError(CLIError):
    pass


class Cancelled(CLIError):
    pass


class OwnerUnknownError(CLIError):
    pass


class LocalResourceError(CLIError):
    pass


@dataclass(frozen=True)
class Options:
    """Invocation options after merging flags, the config file and the environment."""

    repository_name: str
    create_directory: bool = False
    private: bool = False
    owner: str | None = None
    template_dir: Path | None = None
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    clone_protocol: str = "https"

    @property
    def full_name(self) -> str:
        """`owner/name` when the owner is known, otherwise the bare name."""
        if self.owner:
            return f"{self.owner}/{self.repository_name}"
        return self.repository_name


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def _first(*values: T | None) -> T | None:
    for value in values:
        if value is not None:
            return value
    return None


def resolve_options(args: argparse.Namespace) -> Options:
    """
    Validate parsed arguments and merge them with the config file and environment.

    The repository name is checked before anything else is read.
    """
    name = (args.name or "").strip()
    if not name:
        raise InputError("Repository name is required.")

    config = load_config(args.config)

    owner = _first(args.owner, config.owner, os.environ.get("GITHUB_OWNER") or None)
    template_dir = Path(args.template).expanduser() if args.template else config.template_dir
    protocol = "ssh" if args.ssh else (config.clone_protocol or "https")

    return Options(
        repository_name=name,
        create_directory=bool(_first(args.create_dir, config.create_dir, False)),
        private=bool(_first(args.private, config.private, False)),
        owner=owner.strip() if owner else None,
        template_dir=template_dir,
        commit_message=args.message or config.commit_message or DEFAULT_COMMIT_MESSAGE,
        clone_protocol=protocol,
    )


def remote_exists(full_name: str, *, cwd: Path) -> bool:
    """Best-effort probe: any failure of `gh repo view` counts as "does not exist"."""
    return command_ok("gh", "repo", "view", full_name, cwd=cwd)


def _resolve_owner(options: Options) -> str:
    if options.owner:
        return options.owner
    token = os.environ.get("GITHUB_TOKEN") or ""
    if not token:
        raise OwnerUnknownError(
            "Cloning needs the repository owner (use -owner, set `owner` in the config file, "
            "or set GITHUB_OWNER or GITHUB_TOKEN)"
        )
    login = GitHubClient(token).viewer_login()
    log.debug("Resolved repository owner from GitHub API: %s", login)
    return login


def clone_url(owner: str, name: str, protocol: str = "https") -> str:
    if protocol == "ssh":
        return f"git@github.com:{owner}/{name}.git"
    return f"https://github.com/{owner}/{name}.git"


def _prepare_directory(name: str, *, cwd: Path) -> Path:
    """Create `cwd/name`, or ask before reusing it; return the new working directory."""
    path = cwd / name
    if path.exists():
        if not path.is_dir():
            raise LocalResourceError(f"Error creating directory: {path} exists and is not a directory")
        if not confirm(f"Warning: Directory '{name}' already exists.\n Do you want to use it?"):
            raise Cancelled("Operation canceled.")
        print(f"Using existing repository directory: {name}")
        return path

    try:
        path.mkdir()
    except OSError as e:
        raise LocalResourceError(f"Error creating directory: {e}") from e
    print(f"Repository directory '{name}' created successfully!")
    return path


def create_cmd(options: Options, *, cwd: Path) -> int:
    name = options.repository_name
    full_name = options.full_name

    print(f"Checking if repository '{full_name}' already exists...")
    if remote_exists(full_name, cwd=cwd):
        if confirm(f"Repository '{full_name}' already exists on GitHub.\n Do you want to clone it instead?"):
            url = clone_url(_resolve_owner(options), name, options.clone_protocol)
            run_command("git", "clone", url, name, cwd=cwd)
            print("Repository cloned successfully!")
            return 0

        if not confirm(
            f"Warning: Repository '{full_name}' already exists.\n"
            " Do you want to continue and use the existing repository?"
        ):
            raise Cancelled("Operation canceled.")
        print(f"Using existing remote repository: {full_name}")
    else:
        print(f"Repository '{full_name}' does not exist on GitHub. Proceeding with creation...")

    workdir = _prepare_directory(name, cwd=cwd) if options.create_directory else cwd

    if options.template_dir is not None:
        result = seed_repository(
            template_dir=options.template_dir,
            destination_dir=workdir,
            context=build_context(repo_name=name, owner=options.owner, private=options.private),
        )
        log.info(
            "Seeded from %s: %d rendered, %d copied, %d kept",
            options.template_dir,
            result.rendered_files,
            result.copied_files,
            result.skipped_files,
        )

    run_command("git", "init", cwd=workdir)
    run_command("git", "add", ".", cwd=workdir)
    run_command("git", "commit", "--allow-empty", "-m", options.commit_message, cwd=workdir)

    visibility = "--private" if options.private else "--public"
    run_command("gh", "repo", "create", full_name, visibility, "--source=.", "--remote=origin", "--push", cwd=workdir)

    print(f"Repository '{full_name}' created successfully and synchronized with GitHub!")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Create a git repository and publish it on GitHub",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )

    def bool_flag(*names: str, help: str) -> None:
        # Accepts both `-flag` and `-flag=true|false`.
        p.add_argument(*names, nargs="?", const=True, default=None, type=_parse_bool, metavar="BOOL", help=help)

    p.add_argument(
        "-name",
        "--name",
        default="",
        help="Repository name (required). If the remote repository already exists, ask whether to clone it",
    )
    bool_flag(
        "-create-dir",
        "--create-dir",
        help="Create a directory for the repository (default: current directory). "
        "If the directory already exists, ask whether to reuse it",
    )
    bool_flag("-private", "--private", help="Make the repository private (default: public)")
    p.add_argument("-owner", "--owner", default=None, help="GitHub user or organization owning the repository")
    p.add_argument("-template", "--template", default=None, help="Template directory to render into the repository")
    p.add_argument("-message", "--message", default=None, help=f"Initial commit message (default: {DEFAULT_COMMIT_MESSAGE!r})")
    bool_flag("-ssh", "--ssh", help="Clone over SSH instead of HTTPS")
    p.add_argument("-config", "--config", default=None, help="YAML defaults file (default: ~/.config/create-repo/config.yaml)")
    bool_flag("-verbose", "--verbose", help="Enable debug logging")
    bool_flag("-help", "--help", "-h", help="Show this help message")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.help:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = resolve_options(args)
        return create_cmd(options, cwd=Path.cwd())
    except InputError as e:
        print(f"Error: {e}")
        parser.print_help()
        return 1
    except Cancelled as e:
        print(e)
        return 1
    except (CLIError, CommandError, ConfigError, GitHubError, RenderError) as e:
        log.error("%s", e)
        return 1
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
