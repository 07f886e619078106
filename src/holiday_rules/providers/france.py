"""
Holidays in France.

Fixed holidays plus the moveable holidays based on Easter
(Pâques, Ascension, Pentecôte).
"""

from holiday_rules.core.calculators import fixed
from holiday_rules.core.gating import since
from holiday_rules.core.provider import ProviderDefinition
from holiday_rules.core.rules import rule
from holiday_rules.providers import christian, common


FRANCE = ProviderDefinition(
    id="FR",
    name="France",
    timezone="Europe/Paris",
    locale="fr_FR",
    rules=(
        common.new_years_day(),                                          # Jour de l'an
        christian.easter_monday(),                                       # Lundi de Pâques
        common.international_workers_day(),                              # Fête du travail
        rule("victoryInEuropeDay", fixed(5, 8), when=since(1945)),       # Victoire 1945
        christian.ascension_day(),                                       # Ascension
        christian.pentecost_monday(),                                    # Lundi de Pentecôte
        rule("bastilleDay", fixed(7, 14), when=since(1790)),             # Fête nationale
        christian.assumption_of_mary(),                                  # Assomption
        christian.all_saints_day(),                                      # Toussaint
        rule("armisticeDay", fixed(11, 11), when=since(1919)),           # Armistice
        christian.christmas_day(),                                       # Noël
    ),
)
