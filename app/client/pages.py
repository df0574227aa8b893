"""Terminal pages for managing spaces.

Each page only renders and keeps form state; every call goes through the
query/mutation helpers in ``app.client.queries``.
"""
from __future__ import annotations
import argparse
import asyncio
import sys
from typing import Callable, List, Optional, TextIO
import httpx
from app.client.api import create_api_client
from app.client.queries import (
    QueryClient,
    use_create_space,
    use_delete_space,
    use_health,
    use_space,
    use_spaces,
    use_update_space,
)
from app.client.space_service import SpaceService
from app.core.config import get_settings
from app.schemas.spaces import SpaceDTO


def format_error(error: Exception) -> str:
    return str(error) or error.__class__.__name__


def render_table(spaces: List[SpaceDTO]) -> str:
    headers = ("ID", "NAME", "CAPACITY", "UPDATED")
    rows = [(s.id, s.name, str(s.capacity), s.updatedAt) for s in spaces]
    widths = [max([len(h)] + [len(r[i]) for r in rows]) for i, h in enumerate(headers)]
    lines = ["  ".join(h.ljust(w) for h, w in zip(headers, widths))]
    lines.append("  ".join("-" * w for w in widths))
    for row in rows:
        lines.append("  ".join(cell.ljust(w) for cell, w in zip(row, widths)))
    return "\n".join(lines)


class SpacesPage:
    def __init__(
        self,
        qc: QueryClient,
        service: SpaceService,
        out: Optional[TextIO] = None,
        confirm: Optional[Callable[[str], bool]] = None,
    ):
        self.qc = qc
        self.service = service
        self.out = out or sys.stdout
        self.confirm = confirm or _confirm_on_tty
        self.create_mutation = use_create_space(qc, service)
        self.update_mutation = use_update_space(qc, service)
        self.delete_mutation = use_delete_space(qc, service)

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def _error_panel(self, error: Exception) -> int:
        self._print(f"Error: {format_error(error)}")
        return 1

    async def show_list(self) -> int:
        self._print("Loading spaces...")
        result = await use_spaces(self.qc, self.service)
        if result.is_error:
            return self._error_panel(result.error)
        if not result.data:
            self._print("No spaces yet. Run `doublespot create` to add one.")
            return 0
        self._print(render_table(result.data))
        return 0

    async def create(self, name: str, capacity: int) -> int:
        result = await self.create_mutation.mutate(name=name, capacity=capacity)
        if result.is_error:
            return self._error_panel(result.error)
        self._print(f"Created space {result.data.id}.")
        return await self.show_list()

    async def edit(self, id: str, name: Optional[str] = None, capacity: Optional[int] = None) -> int:
        current = await use_space(self.qc, self.service, id)
        if current.is_error:
            return self._error_panel(current.error)

        # Only send the fields the form actually changed.
        changes = {}
        if name is not None and name != current.data.name:
            changes["name"] = name
        if capacity is not None and capacity != current.data.capacity:
            changes["capacity"] = capacity
        if not changes:
            self._print("Nothing to update.")
            return 0

        result = await self.update_mutation.mutate(id, **changes)
        if result.is_error:
            return self._error_panel(result.error)
        self._print(f"Updated space {id}.")
        return await self.show_list()

    async def delete(self, id: str, assume_yes: bool = False) -> int:
        if not assume_yes and not self.confirm(f"Delete space {id}? [y/N] "):
            self._print("Cancelled.")
            return 0
        result = await self.delete_mutation.mutate(id)
        if result.is_error:
            return self._error_panel(result.error)
        self._print(f"Deleted space {id}.")
        return await self.show_list()


class HealthPage:
    def __init__(self, qc: QueryClient, client: httpx.AsyncClient, out: Optional[TextIO] = None):
        self.qc = qc
        self.client = client
        self.out = out or sys.stdout

    async def show(self) -> int:
        print("Checking backend health...", file=self.out)
        result = await use_health(self.qc, self.client)
        if result.is_error:
            print(f"Error: {format_error(result.error)}", file=self.out)
            return 1
        health = result.data
        print(f"Status: {health.status}", file=self.out)
        print(f"Message: {health.message}", file=self.out)
        print(f"Checked at: {health.timestamp}", file=self.out)
        return 0


def _confirm_on_tty(prompt: str) -> bool:
    try:
        answer = input(prompt)
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="doublespot", description="Manage spaces")
    parser.add_argument("--base-url", default=None, help="API base URL (default: API_BASE_URL setting)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List spaces, newest first")

    create = sub.add_parser("create", help="Create a space")
    create.add_argument("--name", required=True)
    create.add_argument("--capacity", required=True, type=int)

    edit = sub.add_parser("edit", help="Change a space's name or capacity")
    edit.add_argument("id")
    edit.add_argument("--name")
    edit.add_argument("--capacity", type=int)

    delete = sub.add_parser("delete", help="Delete a space")
    delete.add_argument("id")
    delete.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")

    sub.add_parser("health", help="Check backend health")
    return parser


async def run(args: argparse.Namespace, transport: Optional[httpx.AsyncBaseTransport] = None, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    base_url = args.base_url or get_settings().api_base_url
    qc = QueryClient()
    async with create_api_client(base_url, transport=transport) as client:
        if args.command == "health":
            return await HealthPage(qc, client, out=out).show()

        page = SpacesPage(qc, SpaceService(client), out=out)
        if args.command == "list":
            return await page.show_list()
        if args.command == "create":
            return await page.create(args.name, args.capacity)
        if args.command == "edit":
            return await page.edit(args.id, name=args.name, capacity=args.capacity)
        return await page.delete(args.id, assume_yes=args.yes)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
