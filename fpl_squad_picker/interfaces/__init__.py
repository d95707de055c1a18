"""
FPL Squad Picker Interfaces

This package contains the presentation layer:
- Text export and display tables for recommended squads
- The ``fpl-squad-picker`` command line interface
"""

from .squad_export import export_filename, render_squad_export, squad_to_dataframe

__all__ = ["export_filename", "render_squad_export", "squad_to_dataframe"]
