import argparse
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np

from src.config import GENERATOR_CONFIG, MAX_SIZE, PATHS
from src.lib.s0_payload import encode_payload
from src.lib.s3_grid import random_payload
from src.services import SolverService

EXIT_SOLVED = 0
EXIT_UNSOLVABLE = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solveur Démineur par propagation de contraintes")

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "--payload",
        help="Payload hexadécimal : largeur, hauteur puis les cellules (ex: 0102 0009)",
    )
    mode.add_argument(
        "--grid",
        help="Cellules row-major séparées par des espaces ou des virgules (avec --width/--height)",
    )
    mode.add_argument(
        "--random",
        action="store_true",
        help="Résout des grilles aléatoires de 1x1 à NxN (voir --size/--samples)",
    )
    parser.add_argument("--width", type=int, help="Largeur de la grille (mode --grid)")
    parser.add_argument("--height", type=int, help="Hauteur de la grille (mode --grid)")
    parser.add_argument(
        "--size",
        type=int,
        default=MAX_SIZE,
        help="Dimension maximale des grilles aléatoires (défaut: %d)" % MAX_SIZE,
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=GENERATOR_CONFIG['samples_per_size'],
        help="Nombre de grilles aléatoires par dimension",
    )
    parser.add_argument("--seed", type=int, help="Graine du générateur aléatoire")
    parser.add_argument(
        "--log-dir",
        nargs="?",
        const=PATHS['logs'],
        help="Active les logs JSON des résolutions (dossier, défaut: %s)" % PATHS['logs'],
    )
    return parser


def _parse_cells(text: str) -> List[int]:
    return [int(token) for token in text.replace(",", " ").split()]


def _run_random(service: SolverService, args: argparse.Namespace) -> int:
    rng = np.random.default_rng(args.seed)
    payloads = [
        random_payload(n, n, rng=rng)
        for n in range(1, args.size + 1)
        for _ in range(args.samples)
    ]
    results = service.process_batch(payloads)
    solved = sum(1 for r in results if r['success'])
    print(f"{len(results)} grilles traitées, {solved} résolues, {len(results) - solved} insolubles")
    return EXIT_SOLVED


def _run_single(service: SolverService, data: bytes) -> int:
    result = service.process_instruction(data)
    for message in result['messages']:
        print(message)
    return EXIT_SOLVED if result['success'] else EXIT_UNSOLVABLE


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = {'log_solves': args.log_dir is not None}
    if args.log_dir:
        config['log_dir'] = args.log_dir
    service = SolverService(config=config)

    try:
        if args.random:
            code = _run_random(service, args)
        elif args.payload is not None:
            code = _run_single(service, bytes.fromhex(args.payload))
        else:
            if args.width is None or args.height is None:
                parser.error("--grid requiert --width et --height")
            code = _run_single(service, encode_payload(args.width, args.height, _parse_cells(args.grid)))
    except ValueError as e:  # InvalidPayloadError, hexadécimal ou cellule hors octet
        print(f"[ERREUR] Payload invalide: {e}")
        code = EXIT_INVALID
    finally:
        session_file = service.close()
        if session_file:
            print(f"Logs de session sauvegardés dans: {session_file}")

    print("[FIN] Succès" if code == EXIT_SOLVED else "[FIN] Échec")
    return code


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nArrêt demandé par l'utilisateur.")
