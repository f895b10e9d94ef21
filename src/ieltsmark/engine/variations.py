"""Static variation tables used by the answer matchers.

Each table maps a canonical form to the surface forms a marker treats as
interchangeable. Tables are built once at import time and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional


def _freeze(table: dict[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType(table)


SPELLING_VARIATIONS = _freeze({
    # -our / -or
    "colour": ("colour", "color"),
    "honour": ("honour", "honor"),
    "favour": ("favour", "favor"),
    "behaviour": ("behaviour", "behavior"),
    "neighbour": ("neighbour", "neighbor"),
    "labour": ("labour", "labor"),
    "harbour": ("harbour", "harbor"),
    "vapour": ("vapour", "vapor"),
    "flavour": ("flavour", "flavor"),
    "rumour": ("rumour", "rumor"),
    "humour": ("humour", "humor"),
    "tumour": ("tumour", "tumor"),
    # -ise / -ize
    "organise": ("organise", "organize"),
    "organisation": ("organisation", "organization"),
    "realise": ("realise", "realize"),
    "recognise": ("recognise", "recognize"),
    "analyse": ("analyse", "analyze"),
    "apologise": ("apologise", "apologize"),
    "characterise": ("characterise", "characterize"),
    "criticise": ("criticise", "criticize"),
    "emphasise": ("emphasise", "emphasize"),
    "specialise": ("specialise", "specialize"),
    "standardise": ("standardise", "standardize"),
    "summarise": ("summarise", "summarize"),
    "prioritise": ("prioritise", "prioritize"),
    "visualise": ("visualise", "visualize"),
    "minimise": ("minimise", "minimize"),
    "maximise": ("maximise", "maximize"),
    "utilise": ("utilise", "utilize"),
    # -re / -er
    "centre": ("centre", "center"),
    "metre": ("metre", "meter"),
    "litre": ("litre", "liter"),
    "theatre": ("theatre", "theater"),
    "fibre": ("fibre", "fiber"),
    "calibre": ("calibre", "caliber"),
    # -ogue / -og
    "catalogue": ("catalogue", "catalog"),
    "dialogue": ("dialogue", "dialog"),
    "analogue": ("analogue", "analog"),
    "prologue": ("prologue", "prolog"),
    # -ence / -ense
    "defence": ("defence", "defense"),
    "offence": ("offence", "offense"),
    "licence": ("licence", "license"),
    "pretence": ("pretence", "pretense"),
    # -ll- / -l-
    "travelling": ("travelling", "traveling"),
    "traveller": ("traveller", "traveler"),
    "cancelled": ("cancelled", "canceled"),
    "cancelling": ("cancelling", "canceling"),
    "labelled": ("labelled", "labeled"),
    "modelling": ("modelling", "modeling"),
    "counsellor": ("counsellor", "counselor"),
    "jewellery": ("jewellery", "jewelry"),
    # other
    "grey": ("grey", "gray"),
    "programme": ("programme", "program"),
    "cheque": ("cheque", "check"),
    "tyre": ("tyre", "tire"),
    "aluminium": ("aluminium", "aluminum"),
    "aeroplane": ("aeroplane", "airplane"),
    "storey": ("storey", "story"),
    "plough": ("plough", "plow"),
    "mould": ("mould", "mold"),
    "doughnut": ("doughnut", "donut"),
    "practise": ("practise", "practice"),
    "focussed": ("focussed", "focused"),
    "ageing": ("ageing", "aging"),
    "judgement": ("judgement", "judgment"),
    "acknowledgement": ("acknowledgement", "acknowledgment"),
    "learnt": ("learnt", "learned"),
    "burnt": ("burnt", "burned"),
    "dreamt": ("dreamt", "dreamed"),
    "spelt": ("spelt", "spelled"),
    "smelt": ("smelt", "smelled"),
})

_ORDINAL_WORDS = (
    "first", "second", "third", "fourth", "fifth", "sixth", "seventh",
    "eighth", "ninth", "tenth", "eleventh", "twelfth", "thirteenth",
    "fourteenth", "fifteenth", "sixteenth", "seventeenth", "eighteenth",
    "nineteenth", "twentieth", "twenty-first", "twenty-second",
    "twenty-third", "twenty-fourth", "twenty-fifth", "twenty-sixth",
    "twenty-seventh", "twenty-eighth", "twenty-ninth", "thirtieth",
    "thirty-first",
)


def ordinal_suffix(n: int) -> str:
    if 10 <= n % 100 <= 20:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


ORDINAL_MAP = _freeze({
    f"{n}{ordinal_suffix(n)}": (str(n), word, f"{n}{ordinal_suffix(n)}")
    for n, word in enumerate(_ORDINAL_WORDS, start=1)
})

MONTH_VARIATIONS = _freeze({
    "january": ("jan", "january", "01", "1"),
    "february": ("feb", "february", "02", "2"),
    "march": ("mar", "march", "03", "3"),
    "april": ("apr", "april", "04", "4"),
    "may": ("may", "05", "5"),
    "june": ("jun", "june", "06", "6"),
    "july": ("jul", "july", "07", "7"),
    "august": ("aug", "august", "08", "8"),
    "september": ("sep", "sept", "september", "09", "9"),
    "october": ("oct", "october", "10"),
    "november": ("nov", "november", "11"),
    "december": ("dec", "december", "12"),
})

NUMBER_WORDS = _freeze({
    "0": ("zero", "o", "oh", "0", "nil", "nought"),
    "1": ("one", "1"),
    "2": ("two", "2"),
    "3": ("three", "3"),
    "4": ("four", "4"),
    "5": ("five", "5"),
    "6": ("six", "6"),
    "7": ("seven", "7"),
    "8": ("eight", "8"),
    "9": ("nine", "9"),
    "10": ("ten", "10"),
    "11": ("eleven", "11"),
    "12": ("twelve", "12"),
    "13": ("thirteen", "13"),
    "14": ("fourteen", "14"),
    "15": ("fifteen", "15"),
    "16": ("sixteen", "16"),
    "17": ("seventeen", "17"),
    "18": ("eighteen", "18"),
    "19": ("nineteen", "19"),
    "20": ("twenty", "20"),
    "30": ("thirty", "30"),
    "40": ("forty", "40"),
    "50": ("fifty", "50"),
    "60": ("sixty", "60"),
    "70": ("seventy", "70"),
    "80": ("eighty", "80"),
    "90": ("ninety", "90"),
    "100": ("hundred", "one hundred", "a hundred", "100"),
    "1000": ("thousand", "one thousand", "a thousand", "1000", "1,000"),
    "1000000": ("million", "one million", "a million", "1000000", "1,000,000"),
})

# Multipliers recognised when reading multi-word numbers ("thirty thousand").
NUMBER_SCALES = _freeze({
    "hundred": 100,
    "thousand": 1000,
    "million": 1000000,
    "billion": 1000000000,
})

MEASUREMENT_VARIATIONS = _freeze({
    "km": ("km", "kms", "kilometre", "kilometres", "kilometer", "kilometers"),
    "m": ("m", "metre", "metres", "meter", "meters"),
    "cm": ("cm", "centimetre", "centimetres", "centimeter", "centimeters"),
    "mm": ("mm", "millimetre", "millimetres", "millimeter", "millimeters"),
    "kg": ("kg", "kgs", "kilogram", "kilograms", "kilo", "kilos"),
    "g": ("g", "gram", "grams", "gramme", "grammes"),
    "mg": ("mg", "milligram", "milligrams"),
    "l": ("l", "litre", "litres", "liter", "liters"),
    "ml": ("ml", "millilitre", "millilitres", "milliliter", "milliliters"),
    "ft": ("ft", "foot", "feet"),
    "in": ("in", "inch", "inches"),
    "mi": ("mi", "mile", "miles"),
    "lb": ("lb", "lbs", "pound", "pounds"),
    "oz": ("oz", "ounce", "ounces"),
    "sqm": ("sqm", "sq m", "square metre", "square metres", "square meter",
            "square meters", "m²", "m2"),
    "sqft": ("sqft", "sq ft", "square foot", "square feet", "ft²", "ft2"),
    "ha": ("ha", "hectare", "hectares"),
    "acre": ("acre", "acres"),
})

CURRENCY_VARIATIONS = _freeze({
    "$": ("$", "dollar", "dollars", "usd", "us dollar", "us dollars"),
    "£": ("£", "pound", "pounds", "gbp", "pound sterling"),
    "€": ("€", "euro", "euros", "eur"),
    "¥": ("¥", "yen", "jpy"),
    "₹": ("₹", "rupee", "rupees", "inr"),
    "₽": ("₽", "ruble", "rubles", "rub"),
    "A$": ("a$", "aud", "australian dollar", "australian dollars"),
    "C$": ("c$", "cad", "canadian dollar", "canadian dollars"),
    "cent": ("cent", "cents", "c", "¢"),
    "pence": ("pence", "p", "penny"),
})


def same_group(table: Mapping[str, tuple[str, ...]], a: str, b: str) -> bool:
    """True if ``a`` and ``b`` appear together in any entry of ``table``."""
    return any(a in forms and b in forms for forms in table.values())


def month_number(name: str) -> Optional[int]:
    """Month number for a month name, abbreviation or numeral."""
    name = name.lower()
    for forms in MONTH_VARIATIONS.values():
        if name in forms:
            return next(int(f) for f in forms if f.isdigit())
    return None
