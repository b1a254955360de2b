# code/goggles/main.py
#!/usr/bin/env python3
"""
Point d'entrée principal de l'outil goggles.
Localise la dépendance, collecte ses données puis écrit le rapport rendu sur stdout.
Les erreurs (fichier manquant, template absent, variable inconnue) ne sont pas
interceptées: elles terminent le processus avec le diagnostic par défaut.
"""
import logging
from typing import List, Optional

import global_config
from lib import utils as shared_utils
from . import cli as goggles_cli
from . import collector
from . import renderer

# --- Logger pour ce module ---
logger = logging.getLogger(__name__)
# -----------------------------


def generate(package_name: str) -> None:
    """Construit le contexte, rend le rapport et l'écrit sur stdout."""
    context = collector.build_context(package_name)
    shared_utils.print_stage_header("Étape 3: Rendu du rapport")
    report = renderer.render(context)
    # Rendu complet avant toute écriture: un échec plus haut ne produit aucune sortie.
    print(report)


def goggles_tool_main(argv: Optional[List[str]] = None) -> None:
    """Fonction principale de l'outil goggles."""
    args = goggles_cli.parse_arguments(argv)

    # --- Configurer le logging TRES TOT ---
    shared_utils.setup_logging(debug_mode=args.debug, log_file=args.log_file)
    # ----------------------------------

    logger.info(f"Lancement de goggles pour '{args.package_name}' (Debug: {args.debug})")
    logger.debug(f"Configuration globale: {global_config.describe()}")
    generate(args.package_name)
    logger.info("Rapport généré. SUCCÈS COMPLET.")


# --- Exécution ---
if __name__ == "__main__":
    goggles_tool_main()
