"""Static holiday name translations and locale fallback.

``TRANSLATIONS`` maps a holiday key to ``{locale: display name}``.  Country
rules may add or override names (e.g. for renamed holidays); the registry
merges both into ``HolidayRecord.localized_names``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

BASE_LOCALE = "en_US"

TRANSLATIONS: dict[str, dict[str, str]] = {
    "newYearsDay": {
        "en_US": "New Year's Day",
        "nl_NL": "Nieuwjaarsdag",
        "nl_BE": "Nieuwjaar",
        "fr_FR": "Jour de l'An",
        "fr_BE": "Nouvel An",
        "it_IT": "Capodanno",
        "ja_JP": "元日",
    },
    "epiphany": {
        "en_US": "Epiphany",
        "nl_NL": "Driekoningen",
        "it_IT": "Epifania",
        "fr_FR": "L'Épiphanie",
    },
    "valentinesDay": {
        "en_US": "Valentine's Day",
        "nl_NL": "Valentijnsdag",
    },
    "carnivalDay": {
        "en_US": "Carnival",
        "nl_NL": "Carnaval",
    },
    "secondCarnivalDay": {
        "en_US": "Carnival",
        "nl_NL": "Carnaval",
    },
    "thirdCarnivalDay": {
        "en_US": "Carnival",
        "nl_NL": "Carnaval",
    },
    "ashWednesday": {
        "en_US": "Ash Wednesday",
        "nl_NL": "Aswoensdag",
        "fr_FR": "Mercredi des Cendres",
        "it_IT": "Mercoledì delle Ceneri",
    },
    "goodFriday": {
        "en_US": "Good Friday",
        "nl_NL": "Goede Vrijdag",
        "fr_FR": "Vendredi saint",
        "it_IT": "Venerdì santo",
    },
    "easter": {
        "en_US": "Easter Sunday",
        "nl_NL": "Eerste paasdag",
        "nl_BE": "Pasen",
        "fr_FR": "Dimanche de Pâques",
        "fr_BE": "Pâques",
        "it_IT": "Pasqua",
    },
    "easterMonday": {
        "en_US": "Easter Monday",
        "nl_NL": "Tweede paasdag",
        "nl_BE": "Paasmaandag",
        "fr_FR": "Lundi de Pâques",
        "fr_BE": "Lundi de Pâques",
        "it_IT": "Lunedi` dell'Angelo",
    },
    "internationalWorkersDay": {
        "en_US": "International Workers' Day",
        "nl_BE": "Dag van de arbeid",
        "fr_FR": "Fête du Travail",
        "fr_BE": "Fête du Travail",
        "it_IT": "Festa del Lavoro",
    },
    "ascensionDay": {
        "en_US": "Ascension Day",
        "nl_NL": "Hemelvaart",
        "nl_BE": "Onze Lieve Heer hemelvaart",
        "fr_FR": "Ascension",
        "fr_BE": "Ascension",
        "it_IT": "Ascensione",
    },
    "pentecost": {
        "en_US": "Whitsunday",
        "nl_NL": "Eerste pinksterdag",
        "nl_BE": "Pinksteren",
        "fr_FR": "Pentecôte",
        "fr_BE": "Pentecôte",
        "it_IT": "Pentecoste",
    },
    "pentecostMonday": {
        "en_US": "Whitmonday",
        "nl_NL": "Tweede pinksterdag",
        "nl_BE": "Pinkstermaandag",
        "fr_FR": "Lundi de Pentecôte",
        "fr_BE": "Lundi de Pentecôte",
        "it_IT": "Lunedì di Pentecoste",
    },
    "assumptionOfMary": {
        "en_US": "Assumption of Mary",
        "nl_BE": "Onze Lieve Vrouw hemelvaart",
        "fr_FR": "L'Assomption de Marie",
        "fr_BE": "Assomption",
        "it_IT": "Assunzione di Maria Vergine",
    },
    "allSaintsDay": {
        "en_US": "All Saints' Day",
        "nl_NL": "Allerheiligen",
        "nl_BE": "Allerheiligen",
        "it_IT": "Festa di Tutti i Santi",
        "fr_FR": "La Toussaint",
        "fr_BE": "Toussaint",
    },
    "immaculateConception": {
        "en_US": "Immaculate Conception",
        "it_IT": "Immacolata Concezione",
        "fr_FR": "Immaculée Conception",
    },
    "christmasDay": {
        "en_US": "Christmas",
        "nl_NL": "Eerste kerstdag",
        "nl_BE": "Kerstmis",
        "fr_FR": "Noël",
        "fr_BE": "Noël",
        "it_IT": "Natale",
        "ja_JP": "クリスマス",
    },
    "secondChristmasDay": {
        "en_US": "Second Christmas Day",
        "nl_NL": "Tweede kerstdag",
    },
    "stStephensDay": {
        "en_US": "St. Stephen's Day",
        "it_IT": "Santo Stefano",
        "fr_FR": "Saint-Étienne",
    },
    # Belgium
    "nationalDay": {
        "en_US": "Belgian National Day",
        "nl_BE": "Nationale feestdag",
        "fr_BE": "Fête nationale",
    },
    "armisticeDay": {
        "en_US": "Armistice Day",
        "nl_BE": "Wapenstilstand",
        "fr_BE": "Armistice",
        "fr_FR": "Armistice 1918",
    },
    # France
    "victoryInEuropeDay": {
        "en_US": "Victory in Europe Day",
        "fr_FR": "Victoire 1945",
    },
    "bastilleDay": {
        "en_US": "Bastille Day",
        "fr_FR": "La Fête nationale",
    },
    # Italy
    "liberationDay": {
        "en_US": "Liberation Day",
        "it_IT": "Festa della Liberazione",
        "nl_NL": "Bevrijdingsdag",
    },
    "republicDay": {
        "en_US": "Republic Day",
        "it_IT": "Festa della Repubblica",
    },
    # Netherlands
    "commemorationDay": {
        "en_US": "Commemoration Day",
        "nl_NL": "Dodenherdenking",
    },
    "queensDay": {
        "en_US": "Queen's Day",
        "nl_NL": "Koninginnedag",
    },
    "kingsDay": {
        "en_US": "King's Day",
        "nl_NL": "Koningsdag",
    },
    "mothersDay": {
        "en_US": "Mother's Day",
        "nl_NL": "Moederdag",
    },
    "fathersDay": {
        "en_US": "Father's Day",
        "nl_NL": "Vaderdag",
    },
    "princesDay": {
        "en_US": "Prince's Day",
        "nl_NL": "Prinsjesdag",
    },
    "worldAnimalDay": {
        "en_US": "World Animal Day",
        "nl_NL": "Dierendag",
    },
    "halloween": {
        "en_US": "Halloween",
        "nl_NL": "Halloween",
    },
    "stMartinsDay": {
        "en_US": "St. Martin's Day",
        "nl_NL": "Sint Maarten",
    },
    "stNicholasDay": {
        "en_US": "St. Nicholas' Day",
        "nl_NL": "Sinterklaas",
    },
    "summerTime": {
        "en_US": "Summertime",
        "nl_NL": "Zomertijd",
    },
    "winterTime": {
        "en_US": "Wintertime",
        "nl_NL": "Wintertijd",
    },
    # Japan
    "comingOfAgeDay": {
        "en_US": "Coming of Age Day",
        "ja_JP": "成人の日",
    },
    "nationalFoundationDay": {
        "en_US": "National Foundation Day",
        "ja_JP": "建国記念の日",
    },
    "vernalEquinoxDay": {
        "en_US": "Vernal Equinox Day",
        "ja_JP": "春分の日",
    },
    "showaDay": {
        "en_US": "Showa Day",
        "ja_JP": "昭和の日",
    },
    "constitutionMemorialDay": {
        "en_US": "Constitution Memorial Day",
        "ja_JP": "憲法記念日",
    },
    "greeneryDay": {
        "en_US": "Greenery Day",
        "ja_JP": "みどりの日",
    },
    "childrensDay": {
        "en_US": "Children's Day",
        "ja_JP": "こどもの日",
    },
    "marineDay": {
        "en_US": "Marine Day",
        "ja_JP": "海の日",
    },
    "mountainDay": {
        "en_US": "Mountain Day",
        "ja_JP": "山の日",
    },
    "respectForTheAgedDay": {
        "en_US": "Respect for the Aged Day",
        "ja_JP": "敬老の日",
    },
    "autumnalEquinoxDay": {
        "en_US": "Autumnal Equinox Day",
        "ja_JP": "秋分の日",
    },
    "sportsDay": {
        "en_US": "Sports Day",
        "ja_JP": "スポーツの日",
    },
    "cultureDay": {
        "en_US": "Culture Day",
        "ja_JP": "文化の日",
    },
    "laborThanksgivingDay": {
        "en_US": "Labor Thanksgiving Day",
        "ja_JP": "勤労感謝の日",
    },
    "emperorsBirthday": {
        "en_US": "Emperor's Birthday",
        "ja_JP": "天皇誕生日",
    },
    "enthronementDay": {
        "en_US": "Enthronement Day",
        "ja_JP": "即位の日",
    },
    "enthronementProclamationCeremony": {
        "en_US": "Enthronement Proclamation Ceremony",
        "ja_JP": "即位礼正殿の儀",
    },
    "bridgeDay": {
        "en_US": "Bridge Public holiday",
        "ja_JP": "国民の休日",
    },
    # USA
    "martinLutherKingDay": {
        "en_US": "Dr. Martin Luther King Jr's Birthday",
    },
    "washingtonsBirthday": {
        "en_US": "Washington's Birthday",
    },
    "memorialDay": {
        "en_US": "Memorial Day",
    },
    "juneteenth": {
        "en_US": "Juneteenth",
    },
    "independenceDay": {
        "en_US": "Independence Day",
    },
    "labourDay": {
        "en_US": "Labour Day",
    },
    "columbusDay": {
        "en_US": "Columbus Day",
    },
    "veteransDay": {
        "en_US": "Veterans Day",
    },
    "thanksgivingDay": {
        "en_US": "Thanksgiving Day",
    },
}


class Named(Protocol):
    key: str
    localized_names: Mapping[str, str]


def resolve_name(record: Named, locale: str) -> str:
    """Display name of *record* in *locale*.

    Falls back to ``BASE_LOCALE``, then to the raw key.  Never raises.
    """
    names = record.localized_names
    if locale in names:
        return names[locale]

    if BASE_LOCALE in names:
        return names[BASE_LOCALE]
    return record.key


def translations_for(key: str) -> dict[str, str]:
    """Copy of the static translations of *key* (empty when unknown)."""
    return dict(TRANSLATIONS.get(key, {}))
