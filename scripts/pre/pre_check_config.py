# scripts/pre/pre_check_config.py

import argparse
import os
import shlex
import shutil
from collections import Counter
from typing import List

from scripts.core.core_utils import debug_print_sequence, export_name
from scripts.testdata.generate_test_data import SequenceConfig, StepConfig, load_sequence_config


def validate_exports(steps: List[StepConfig]) -> List[str]:
    """Retourne les noms d'export utilisés par plusieurs étapes (warning seulement)."""
    names = [export_name(step.command) for step in steps]
    counts = Counter(n for n in names if n)
    duplicated = sorted(n for n, c in counts.items() if c > 1)
    for name in duplicated:
        print(f"[config] WARNING: export '{name}' écrit par plusieurs étapes, la dernière l'emporte")
    missing = [i for i, n in enumerate(names, start=1) if n is None]
    for idx in missing:
        print(f"[config] WARNING: étape {idx} sans '-o <nom>', aucun export nommé")
    return duplicated


def validate_wrapper(config: SequenceConfig) -> None:
    """Vérifier que le wrapper et le workdir existent (warnings, le run tranchera)."""
    tokens = shlex.split(config.wrapper)
    if not tokens:
        raise SystemExit("[config] wrapper vide")
    if shutil.which(tokens[0]) is None:
        print(f"[config] WARNING: '{tokens[0]}' introuvable dans le PATH")

    if config.workdir and not os.path.isdir(config.workdir):
        raise SystemExit(f"[config] workdir introuvable : {config.workdir}")


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Pré-check d'une séquence de génération de données de test"
    )
    ap.add_argument("--config", required=True, help="Chemin du YAML de séquence")
    ap.add_argument(
        "--verbose", action="store_true", help="Afficher la séquence résolue"
    )
    args = ap.parse_args()

    # load_sequence_config lève SystemExit sur une étape invalide
    config = load_sequence_config(args.config)

    validate_wrapper(config)
    validate_exports(config.steps)

    if args.verbose:
        debug_print_sequence(
            config.name,
            config.description,
            config.wrapper,
            config.workdir,
            [{"command": s.command, "wait_s": s.wait_s} for s in config.steps],
        )

    total_wait = sum(step.wait_s for step in config.steps)
    print(f"[OK] Séquence '{config.name}' validée ({len(config.steps)} étapes, {total_wait}s d'attente).")


if __name__ == "__main__":
    main()
