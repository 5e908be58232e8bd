#!/usr/bin/env python3
"""
Remover permanentemente um projeto (ID) do banco configurado em DATABASE_URL.

Uso:
  python scripts/delete_project.py --id 3f2a...
"""
from __future__ import annotations

import argparse
import sys

from projects_api.repositories.sql_repository import SQLRepository
from projects_api.services.project_service import ProjectService


def main() -> None:
    ap = argparse.ArgumentParser(description="Remover projeto do banco")
    ap.add_argument("--id", required=True, help="ID do projeto a remover")
    args = ap.parse_args()

    svc = ProjectService(SQLRepository())
    svc.delete(args.id)
    print("OK: projeto removido")
    print(f"  ID: {args.id.strip()}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
