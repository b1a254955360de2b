# code/goggles/cli.py
import argparse
from typing import List, Optional


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse les arguments de la ligne de commande de l'outil goggles.
    Le rapport est écrit sur stdout; les options --debug/--log-file ne concernent que les logs.
    """
    parser = argparse.ArgumentParser(
        prog="goggles",
        description="Génère un rapport de code (cloc, fichiers sources, gemspec) "
                    "pour une dépendance installée via bundler.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemples d'utilisation:
  goggles climate_control > CODE.md
  python -m goggles.main climate_control --debug
"""
    )
    parser.add_argument(
        "package_name",
        metavar="PACKAGE_NAME",
        help="Nom de la dépendance à inspecter (résolu via 'bundle show')."
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Active les logs de débogage détaillés (sur stderr)."
    )
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="FILE_PATH",
        help="Écrit aussi les logs (niveau DEBUG) dans ce fichier."
    )
    args = parser.parse_args(argv)
    if not args.package_name.strip():
        parser.error("PACKAGE_NAME ne doit pas être vide.")
    return args
