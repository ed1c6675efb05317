"""
============================================================
 File: selection.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Traduce la scelta fatta nel menu principale (tutti gli
     script, casuale, script di root, una categoria, uscita)
     in una Selection con la lista concreta dei percorsi.
============================================================
"""

import random

from shtoolset.models.script_model import Selection, SelectionKind

ALL_LABEL = "All Scripts"
RANDOM_LABEL = "Random"
ROOT_LABEL = "Root Scripts"


class SelectionModel:
    """
    Risolve le scelte sulla base di una singola scansione.

    Root e categorie vengono letti una volta alla costruzione;
    il menu crea un nuovo SelectionModel a ogni giro.
    """

    def __init__(self, repository, rng=None, root_scripts=None, categories=None):
        self.repository = repository
        self.rng = rng or random.SystemRandom()
        self.root_scripts = list(
            root_scripts if root_scripts is not None else repository.list_root_scripts()
        )
        self.categories = list(
            categories if categories is not None else repository.collect_categories()
        )
        self.all_scripts = repository.get_all_scripts(self.root_scripts, self.categories)

    @property
    def total_scripts(self):
        return len(self.root_scripts) + sum(c.script_count for c in self.categories)

    def all(self):
        return Selection(SelectionKind.ALL, ALL_LABEL, tuple(self.all_scripts))

    def random(self):
        return Selection(SelectionKind.RANDOM, RANDOM_LABEL, tuple(self.all_scripts))

    def root(self):
        return Selection(SelectionKind.CATEGORY, ROOT_LABEL, tuple(self.root_scripts))

    def category(self, name):
        for info in self.categories:
            if info.name == name:
                return Selection(SelectionKind.CATEGORY, info.display_name, info.script_paths)
        raise KeyError(name)

    @staticmethod
    def exit():
        return Selection(SelectionKind.EXIT)

    def draw(self, entries):
        """Indice uniforme in [0, N); ogni estrazione è indipendente dalle precedenti"""
        if not entries:
            raise ValueError("cannot draw from an empty selection")
        return self.rng.randrange(len(entries))
