"""Codec constants and the gemstone abbreviation table."""

from __future__ import annotations

import re

CODE_PREFIX = "GM"
CODE_SEPARATOR = "-"
CODE_SEGMENT_COUNT = 5

# Two-digit years in a code are offsets from this century.
CENTURY_BASE = 2000

MIXED_GEMSTONE_PART = "MIX"
ABBREVIATION_LENGTH = 3
ABBREVIATION_PAD_CHAR = "X"
PIECE_NUMBER_WIDTH = 3

# I and O are omitted so checksums never read as 1 or 0.
CHECKSUM_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
CHECKSUM_LENGTH = 4
CHECKSUM_MODULUS = 9999
CHECKSUM_BASE_WEIGHT = 17
CHECKSUM_DATE_WEIGHT = 23

GEMSTONE_NAME_SEPARATOR = ","

CODE_PATTERN = r"^GM-[0-9]{4}-[A-Z]{3}-[0-9]{3,}-[A-HJ-NP-Z2-9]{4}$"
CODE_REGEX = re.compile(CODE_PATTERN)

# Maximum stored length of a full code.
CODE_MAX_LENGTH = 50

# ---------------------------------------------------------------------------
# Gemstone name -> 3-letter abbreviation
#
# Insertion order is significant: partial matches return the first key that
# contains (or is contained in) the input.
# ---------------------------------------------------------------------------

GEMSTONE_ABBREVIATIONS: dict[str, str] = {
    "AMETHYST": "AME",
    "QUARTZ": "QUA",
    "RUBY": "RUB",
    "SAPPHIRE": "SAP",
    "EMERALD": "EME",
    "DIAMOND": "DIA",
    "TOPAZ": "TOP",
    "GARNET": "GAR",
    "PERIDOT": "PER",
    "TOURMALINE": "TOU",
    "SPINEL": "SPI",
    "ZIRCON": "ZIR",
    "OPAL": "OPA",
    "TURQUOISE": "TUR",
    "MALACHITE": "MAL",
    "AZURITE": "AZU",
    "FLUORITE": "FLU",
    "CALCITE": "CAL",
    "PYRITE": "PYR",
    "OBSIDIAN": "OBS",
    "JADE": "JAD",
    "JADEITE": "JAD",
    "NEPHRITE": "NEP",
    "LAPIS": "LAP",
    "LAPIS LAZULI": "LAP",
    "SODALITE": "SOD",
    "MOONSTONE": "MOO",
    "SUNSTONE": "SUN",
    "LABRADORITE": "LAB",
    "AMAZONITE": "AMA",
    "CITRINE": "CIT",
    "ROSE QUARTZ": "ROS",
    "SMOKY QUARTZ": "SMO",
    "MILKY QUARTZ": "MIL",
    "TIGER EYE": "TIG",
    "HAWK EYE": "HAW",
    "CAT EYE": "CAT",
    "AVENTURINE": "AVE",
    "CHRYSOPRASE": "CHR",
    "AGATE": "AGA",
    "ONYX": "ONX",
    "CARNELIAN": "CAR",
    "JASPER": "JAS",
    "BLOODSTONE": "BLO",
    "MOSS AGATE": "MOS",
    "TREE AGATE": "TRE",
    "FIRE AGATE": "FIR",
    "BLUE LACE AGATE": "BLU",
    "BOTSWANA AGATE": "BOT",
    "CRAZY LACE AGATE": "CRA",
    "DENDRITIC AGATE": "DEN",
    "FORTIFICATION AGATE": "FOR",
    "LACE AGATE": "LAC",
    "PLUME AGATE": "PLU",
    "SNAKESKIN AGATE": "SNA",
    "THUNDER EGG": "THU",
    "AQUAMARINE": "AQU",
    "MORGANITE": "MOR",
    "HELIODOR": "HEL",
    "GOSHENITE": "GOS",
    "RED BERYL": "RED",
    "MAXIXE": "MAX",
    "ALMANDINE": "ALM",
    "PYROPE": "PYR",
    "SPESSARTINE": "SPE",
    "GROSSULAR": "GRO",
    "ANDRADITE": "AND",
    "UVAROVITE": "UVA",
    "RHODOLITE": "RHO",
    "MALAYA": "MAL",
    "TSAVORITE": "TSA",
    "DEMANTOID": "DEM",
    "MELANITE": "MEL",
    "TOPAZOLITE": "TOZ",
    "SCHORL": "SCH",
    "ELBAITE": "ELB",
    "DRAVITE": "DRA",
    "UVITE": "UVI",
    "LIDDICOATITE": "LID",
    "RUBELLITE": "RUB",
    "INDICOLITE": "IND",
    "VERDELITE": "VER",
    "ACHROITE": "ACH",
    "WATERMELON": "WAT",
    "PARAIBA": "PAR",
    "CHROME TOURMALINE": "CHR",
    "IMPERIAL TOPAZ": "IMP",
    "SHERRY TOPAZ": "SHE",
    "LONDON BLUE": "LON",
    "SWISS BLUE": "SWI",
    "SKY BLUE": "SKY",
    "MISTY TOPAZ": "MIS",
    "BALAS RUBY": "BAL",
    "RUBICELLE": "RUB",
    "GAHNITE": "GAH",
    "HERCYNITE": "HER",
    "GALAXITE": "GAL",
    "HYACINTH": "HYA",
    "JARGOON": "JAR",
    "STARLITE": "STA",
    "CHRYSOLITE": "CHR",
    "OLIVINE": "OLI",
    "FORSTERITE": "FOR",
    "FAYALITE": "FAY",
    "PRECIOUS OPAL": "PRE",
    "COMMON OPAL": "COM",
    "FIRE OPAL": "FIR",
    "BOULDER OPAL": "BOU",
    "CRYSTAL OPAL": "CRY",
    "MILK OPAL": "MIL",
    "HONEY OPAL": "HON",
    "PINEAPPLE OPAL": "PIN",
    "WOOD OPAL": "WOO",
    "HYDROPHANE": "HYD",
    "BLACK OPAL": "BLA",
    "WHITE OPAL": "WHI",
    "GRAY OPAL": "GRA",
    "WELO OPAL": "WEL",
    "ETHIOPIAN OPAL": "ETH",
    "MEXICAN OPAL": "MEX",
    "AUSTRALIAN OPAL": "AUS",
    "BRAZILIAN OPAL": "BRA",
    "PERUVIAN OPAL": "PER",
    "CHALCOSIDERITE": "CHA",
    "FAUSTITE": "FAU",
    "PLANERITE": "PLA",
    "CHRYSOCOLLA": "CHR",
    "DIOPTASE": "DIO",
    "ATACAMITE": "ATA",
    "BROCHANTITE": "BRO",
    "ANTLERITE": "ANT",
    "CONNELLITE": "CON",
    "CUPRITE": "CUP",
    "TENORITE": "TEN",
    "PARATACAMITE": "PAR",
    "LAZURITE": "LAZ",
    "HAUYNE": "HAU",
    "NOSEAN": "NOS",
    "CANCINITE": "CAN",
    "AFGHANITE": "AFG",
    "ANTOZONITE": "ANT",
    "CHLOROPHANE": "CHL",
    "BLUE JOHN": "BLU",
    "RAINBOW FLUORITE": "RAI",
    "GREEN FLUORITE": "GRE",
    "PURPLE FLUORITE": "PUR",
    "YELLOW FLUORITE": "YEL",
    "CLEAR FLUORITE": "CLE",
    "PINK FLUORITE": "PIN",
    "ORANGE FLUORITE": "ORA",
    "RED FLUORITE": "RED",
    "BROWN FLUORITE": "BRO",
    "BLACK FLUORITE": "BLA",
    "WHITE FLUORITE": "WHI",
    "GRAY FLUORITE": "GRA",
    "ARAGONITE": "ARA",
    "VATERITE": "VAT",
    "MAGNESITE": "MAG",
    "SIDERITE": "SID",
    "RHODOCHROSITE": "RHO",
    "SMITHSONITE": "SMI",
    "OTAVITE": "OTA",
    "CERUSSITE": "CER",
    "STRONTIANITE": "STR",
    "WITHERITE": "WIT",
    "HUNTITE": "HUN",
    "DOLOMITE": "DOL",
    "ANKERITE": "ANK",
    "KUTNOHORITE": "KUT",
    "MINRECORDITE": "MIN",
    "NORSETHITE": "NOR",
    "BENSTONITE": "BEN",
    "EITELITE": "EIT",
    "FAIRCHILDITE": "FAI",
    "BURBANKITE": "BUR",
    "CARBOCERNAITE": "CAR",
    "CLEVITE": "CLE",
    "DAWSONITE": "DAW",
    "GAYLUSSITE": "GAY",
    "PIRSSONITE": "PIR",
    "SHORTITE": "SHO",
    "TROGTALITE": "TRO",
    "ZEMKORITE": "ZEM",
    "MARCASITE": "MAR",
    "CHALCOPYRITE": "CHA",
    "BORNITE": "BOR",
    "COVELLITE": "COV",
    "GALENA": "GAL",
    "SPHALERITE": "SPH",
    "CINNABAR": "CIN",
    "REALGAR": "REA",
    "ORPIMENT": "ORP",
    "STIBNITE": "STI",
    "MOLYBDENITE": "MOL",
    "TUNGSTENITE": "TUN",
    "MOLYBDITE": "MOL",
    "WULFENITE": "WUL",
    "SCHEELITE": "SCH",
    "POWELLITE": "POW",
    "FERBERITE": "FER",
    "HUEBNERITE": "HUE",
    "WOLFRAMITE": "WOL",
    "SNOWFLAKE OBSIDIAN": "SNO",
    "GOLD SHEEN OBSIDIAN": "GOL",
    "SILVER SHEEN OBSIDIAN": "SIL",
    "RAINBOW OBSIDIAN": "RAI",
    "MAHOGANY OBSIDIAN": "MAH",
    "APACHE TEARS": "APA",
    "PELE'S HAIR": "PEL",
    "PELE'S TEARS": "PEL",
    "CHLOROMELANITE": "CHL",
    "MASSIVE JADEITE": "MAS",
    "IMPERIAL JADE": "IMP",
    "KINGFISHER JADE": "KIN",
    "MOSS-IN-SNOW JADE": "MOS",
    "SPINACH JADE": "SPI",
    "APPLE JADE": "APP",
    "LAVENDER JADE": "LAV",
    "BLUE JADE": "BLU",
    "PURPLE JADE": "PUR",
    "RED JADE": "RED",
    "YELLOW JADE": "YEL",
    "ORANGE JADE": "ORA",
    "BROWN JADE": "BRO",
    "BLACK JADE": "BLA",
    "WHITE JADE": "WHI",
    "GRAY JADE": "GRA",
    "GREEN JADE": "GRE",
    "KUNZITE": "KUN",
    "HIDDENITE": "HID",
    "TANZANITE": "TAN",
    "IOLITE": "IOL",
    "CORDIERITE": "COR",
    "DICHROITE": "DIC",
    "WATER SAPPHIRE": "WAT",
    "STEINHEILITE": "STE",
    "STAR SAPPHIRE": "STA",
    "STAR RUBY": "STA",
    "CAT'S EYE": "CAT",
    "ALEXANDRITE": "ALE",
    "CHRYSOBERYL": "CHR",
    "CYMOPHANE": "CYM",
    "VARIETY CHRYSOBERYL": "VAR",
    "PHENAKITE": "PHE",
    "EUCLASE": "EUC",
    "DANBURITE": "DAN",
    "KORNERUPINE": "KOR",
    "SINHALITE": "SIN",
    "JEREMEJEVITE": "JER",
    "GRANDIDIERITE": "GRA",
    "SERENDIBITE": "SER",
    "PAINITE": "PAI",
    "MUSGRAVITE": "MUS",
    "TAAFFEITE": "TAA",
    "MAXIXE BERYL": "MAX",
}
