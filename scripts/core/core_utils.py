# scripts/core/core_utils.py

import os
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

import yaml

console = Console()
HARNESS_VERSION = "1.0.0"

# ---------- Utils de base ----------

def load_yaml(path: str) -> Dict[str, Any]:
    """Charger un YAML en dict, avec un message d'erreur clair."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"YAML introuvable: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def parse_wait(raw: Any, where: str) -> int:
    """Convertir une durée d'attente en entier >= 0 ou lever SystemExit.

    Accepte int et chaînes numériques ("10"). Les booléens sont refusés,
    YAML transformant `yes`/`no` en bool.
    """
    if isinstance(raw, bool):
        raise SystemExit(f"[config] {where}: wait_s doit être un entier, reçu {raw!r}")
    # int() tronquerait 1.9 en 1
    if isinstance(raw, float) and not raw.is_integer():
        raise SystemExit(f"[config] {where}: wait_s doit être un entier, reçu {raw!r}")
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise SystemExit(f"[config] {where}: wait_s doit être un entier, reçu {raw!r}")
    if value < 0:
        raise SystemExit(f"[config] {where}: wait_s négatif ({value})")
    return value


def export_name(command: str) -> Optional[str]:
    """Nom passé à `-o` dans une commande (None si absent)."""
    tokens = command.split()
    for i, tok in enumerate(tokens[:-1]):
        if tok in ("-o", "--output"):
            return tokens[i + 1]
    return None


# ---------- Logging minimal ----------

def log(script: str, stage: str, msg: str) -> None:
    """Log formaté uniforme."""
    print(f"[{script}:{stage}] {msg}")


def debug_print_sequence(name: str, description: str, wrapper: str,
                         workdir: Optional[str], rows: List[Dict[str, Any]]) -> None:
    """
    Affiche la séquence résolue de manière lisible (panneau + tableau rich).
    `rows` : une entrée par étape avec les clés command / wait_s.
    """
    header_text = (
        f"[bold]Test data[/bold]\n"
        f"[bold]sequence=[/bold]{name}\n"
        f"[bold]version=[/bold]{HARNESS_VERSION}\n"
        f"[bold]wrapper=[/bold]{wrapper}\n"
        f"[bold]workdir=[/bold]{workdir or '.'}\n"
        f"{description}"
    )
    console.print()
    console.print(
        Panel.fit(
            header_text,
            title="CONFIG",
            subtitle="séquence résolue",
            border_style="cyan",
        )
    )

    table = Table(title="Étapes", expand=True)
    table.add_column("#", style="bold", no_wrap=True)
    table.add_column("Commande")
    table.add_column("Export", no_wrap=True)
    table.add_column("Attente (s)", justify="right", no_wrap=True)

    total_wait = 0
    for idx, row in enumerate(rows, start=1):
        wait_s = int(row.get("wait_s", 0))
        total_wait += wait_s
        table.add_row(
            str(idx),
            str(row.get("command", "")),
            export_name(str(row.get("command", ""))) or "-",
            str(wait_s),
        )
    table.add_row("", "[bold]total[/bold]", "", str(total_wait))
    console.print()
    console.print(table)
    console.print()
