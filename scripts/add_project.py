#!/usr/bin/env python3
"""
Cadastrar um novo projeto diretamente no banco configurado em DATABASE_URL.

Uso:
  python scripts/add_project.py --name "Alpha" [--description "primeiro projeto"]
"""
from __future__ import annotations

import argparse
import sys

from projects_api.db.create_tables import create_all
from projects_api.repositories.sql_repository import SQLRepository
from projects_api.services.project_service import ProjectService


def main() -> None:
    ap = argparse.ArgumentParser(description="Cadastrar projeto no banco")
    ap.add_argument("--name", required=True, help="Nome do projeto (nao vazio)")
    ap.add_argument("--description", help="Descricao opcional")
    args = ap.parse_args()

    create_all()
    svc = ProjectService(SQLRepository())
    record = svc.create(args.name, args.description)
    print("OK: projeto cadastrado")
    print(f"  ID: {record.id}")
    print(f"  Nome: {record.name}")
    if record.description:
        print(f"  Descricao: {record.description}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
