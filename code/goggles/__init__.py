# code/goggles/__init__.py
"""
Package de l'outil goggles: rapport de code d'une dépendance (gem) installée.

Modules principaux :
- main.py: Point d'entrée et orchestration.
- cli.py: Interface en ligne de commande.
- locator.py: Résolution du répertoire d'installation via 'bundle show'.
- collector.py: Collecte (cloc, fichiers sources fixes, gemspec).
- context.py: ReportContext, données immuables passées au rendu.
- renderer.py: Rendu du template jinja2.
- config_loader.py: Lecture de config.yaml (commandes des outils externes).
"""
