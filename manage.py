#!/usr/bin/env python3
"""
Stockroom management CLI.

Usage:
    python manage.py start       Start the API server in the background
    python manage.py stop        Graceful shutdown
    python manage.py restart     Stop + start
    python manage.py dev         Run the API in the foreground with reload
    python manage.py status      Check if server is running
    python manage.py migrate     Apply pending SQLite migrations
    python manage.py seed        Load the sample catalogue into the configured store
"""

import argparse
import asyncio
import os
import signal
import socket
import subprocess
import sys
import time
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
PID_FILE = ROOT_DIR / ".stockroom.pid"
APP_PATH = "stockroom.api.main:app"


def _read_pid(pid_file: Path = PID_FILE) -> int | None:
    """Read PID from the PID file, return None if missing or stale."""
    if not pid_file.exists():
        return None
    try:
        pid = int(pid_file.read_text().strip())
    except (ValueError, OSError):
        return None
    if _is_pid_alive(pid):
        return pid
    # Stale PID file
    pid_file.unlink(missing_ok=True)
    return None


def _is_pid_alive(pid: int) -> bool:
    """Check if a process with the given PID is running."""
    try:
        os.kill(pid, 0)
        return True
    except OSError:
        return False


def _write_pid(pid: int, pid_file: Path = PID_FILE) -> None:
    pid_file.write_text(str(pid))


def _kill_pid(pid: int) -> bool:
    """Send SIGTERM to a process. Returns True if the signal was sent."""
    try:
        os.kill(pid, signal.SIGTERM)
        return True
    except OSError:
        return False


def _is_port_free(port: int) -> bool:
    """Check if a port is available for binding."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(("127.0.0.1", port))
        return True
    except OSError:
        return False


def _uvicorn_cmd(host: str, port: int, reload: bool = False) -> list[str]:
    cmd = [
        sys.executable, "-m", "uvicorn",
        APP_PATH,
        "--host", host,
        "--port", str(port),
    ]
    if reload:
        cmd.append("--reload")
    return cmd


def _stop_server() -> bool:
    """Stop the server named in the PID file. Returns True if one was running."""
    pid = _read_pid()
    if pid is None:
        return False

    print(f"Stopping server (PID {pid})...")
    if _kill_pid(pid):
        for _ in range(30):
            if not _is_pid_alive(pid):
                break
            time.sleep(0.1)
        else:
            print("Warning: Process did not exit within 3 seconds.")

    PID_FILE.unlink(missing_ok=True)
    return True


def cmd_start(args: argparse.Namespace) -> None:
    """Start the server in the background."""
    existing_pid = _read_pid()
    if existing_pid is not None:
        print(f"Server already running (PID {existing_pid}). Use 'restart' or 'stop' first.")
        sys.exit(1)

    if not _is_port_free(args.port):
        print(f"Error: Port {args.port} is in use.")
        sys.exit(1)

    print(f"Starting server on {args.host}:{args.port}...")
    proc = subprocess.Popen(_uvicorn_cmd(args.host, args.port), cwd=str(ROOT_DIR))

    _write_pid(proc.pid)
    print(f"Server started (PID {proc.pid}).")
    print(f"  API:      http://{args.host}:{args.port}/api/products")
    print(f"  PID file: {PID_FILE}")


def cmd_stop(args: argparse.Namespace) -> None:
    """Stop the running server."""
    if not _stop_server():
        print("Server is not running.")
        return
    print("Server stopped.")


def cmd_restart(args: argparse.Namespace) -> None:
    """Stop then start the server."""
    if _stop_server():
        print("Server stopped.")
    cmd_start(args)


def cmd_dev(args: argparse.Namespace) -> None:
    """Run the server in the foreground with auto-reload."""
    print(f"Starting backend on {args.host}:{args.port} (reload mode)...")
    try:
        subprocess.run(_uvicorn_cmd(args.host, args.port, reload=True), cwd=str(ROOT_DIR))
    except KeyboardInterrupt:
        print("\nDev server stopped.")


def cmd_status(args: argparse.Namespace) -> None:
    """Check if the server is running."""
    pid = _read_pid()
    if pid is not None:
        print(f"Server is running (PID {pid}).")
    elif not _is_port_free(args.port):
        print(f"No PID file. Port {args.port} is in use by another process.")
    else:
        print(f"Server is not running (port {args.port} is free).")


def cmd_migrate(args: argparse.Namespace) -> None:
    """Apply pending SQLite migrations."""
    from stockroom.config import configure_logging
    from stockroom.infrastructure.storage.sqlite.migrations import run_migrations

    configure_logging()
    results = asyncio.run(run_migrations())
    for r in results:
        status = "ok" if r.success else f"FAILED: {r.error}"
        print(f"v{r.version}_{r.name}: {status} ({r.execution_time_ms}ms)")
    if not results:
        print("Database is up to date.")
    if any(not r.success for r in results):
        sys.exit(1)


async def _seed() -> int:
    from stockroom.application.seed import seed_inventory
    from stockroom.application.services import get_category_service, get_product_service
    from stockroom.infrastructure.storage import close_storage, init_storage

    await init_storage()
    try:
        result = await seed_inventory(await get_category_service(), await get_product_service())
    finally:
        await close_storage()

    print(
        f"Seeded {result.categories_created} categories and "
        f"{result.products_created} products ({result.skipped} already present)."
    )
    for error in result.errors:
        print(f"  error: {error}")
    return 1 if result.errors else 0


def cmd_seed(args: argparse.Namespace) -> None:
    """Load the sample catalogue into the configured store."""
    from stockroom.config import configure_logging, get_settings

    configure_logging()
    if get_settings().storage.backend == "memory":
        print("Warning: STORAGE_BACKEND=memory, seeded data lasts only for this command.")
    sys.exit(asyncio.run(_seed()))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Stockroom management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_server_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--host", default="0.0.0.0", help="Bind host (default: 0.0.0.0)")
        p.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")

    p_start = sub.add_parser("start", help="Start the server")
    add_server_args(p_start)
    p_start.set_defaults(func=cmd_start)

    p_stop = sub.add_parser("stop", help="Stop the server")
    p_stop.set_defaults(func=cmd_stop)

    p_restart = sub.add_parser("restart", help="Restart the server")
    add_server_args(p_restart)
    p_restart.set_defaults(func=cmd_restart)

    p_dev = sub.add_parser("dev", help="Run the server with auto-reload")
    add_server_args(p_dev)
    p_dev.set_defaults(func=cmd_dev)

    p_status = sub.add_parser("status", help="Check if server is running")
    p_status.add_argument("--port", type=int, default=8000, help="Port to check (default: 8000)")
    p_status.set_defaults(func=cmd_status)

    p_migrate = sub.add_parser("migrate", help="Apply SQLite migrations")
    p_migrate.set_defaults(func=cmd_migrate)

    p_seed = sub.add_parser("seed", help="Load the sample catalogue")
    p_seed.set_defaults(func=cmd_seed)

    return parser


def main() -> None:
    args = build_parser().parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
