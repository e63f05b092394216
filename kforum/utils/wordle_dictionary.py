# kforum/utils/wordle_dictionary.py
import logging
import os
from functools import lru_cache
from typing import FrozenSet, Iterable, Tuple

from dotenv import load_dotenv

load_dotenv()

# Optional newline-separated word list merged on top of the bundled one
WORDLE_DICTIONARY_PATH = os.getenv("WORDLE_DICTIONARY_PATH")

# Curated campus-life words used when the model can't (or shouldn't) pick the day's word.
FALLBACK_WORDS: Tuple[str, ...] = (
    # Academic
    "STUDY", "LEARN", "BOOKS", "CLASS", "NOTES", "EXAMS", "GRADE", "MARKS",
    "TEACH", "BRAIN", "SMART", "THINK", "WRITE", "PAPER", "ESSAY", "TOPIC",
    # Campus life
    "DORMS", "ROOMS", "BUDDY", "SQUAD", "CROWD", "PARTY", "CLUBS", "FESTS",
    "MUSIC", "DANCE", "STAGE", "GAMES", "SPORT", "FIELD",
    # Tech / engineering
    "CODES", "LOGIC", "DEBUG", "STACK", "LINUX", "REACT", "LOOPS", "ARRAY",
    "ROBOT", "CYBER", "CLOUD", "NODES", "QUERY", "PIXEL", "BYTES", "INPUT",
    # Canteen
    "FOODS", "MEALS", "SNACK", "PIZZA", "JUICE", "BEANS", "BREAD", "SPICE",
    # Student moods
    "SLEEP", "TIRED", "CHILL", "RELAX", "HAPPY", "PEACE", "DREAM", "GOALS",
    "FOCUS", "GRIND", "BREAK", "NIGHT", "EARLY", "PRIME",
    # Places
    "BLOCK", "TOWER", "PLAZA", "LAWNS", "COURT", "TRACK", "BENCH",
    # Misc college terms
    "BATCH", "MAJOR", "MINOR", "GROUP", "TEAMS", "LEADS", "SKILL",
    "INTRO", "FINAL", "TERMS", "SCALE", "POINT", "RANGE", "LEVEL", "PRIZE",
)

_BUNDLED = """
ABACK ABASE ABATE ABBEY ABBOT ABHOR ABIDE ABLED ABODE ABORT ABOUT ABOVE ABUSE ABYSS ACORN ACRID
ACTOR ACUTE ADAGE ADAPT ADEPT ADMIN ADMIT ADOBE ADOPT ADORE ADORN ADULT AEGIS AFTER AGAIN AGAPE
AGATE AGENT AGILE AGING AGONY AGREE AHEAD AIDED AIMED AISLE ALARM ALBUM ALERT ALGAE ALIAS ALIBI
ALIEN ALIGN ALIKE ALIVE ALLAY ALLEY ALLOT ALLOW ALLOY ALOFT ALONE ALONG ALOOF ALOUD ALPHA ALTAR
ALTER AMASS AMAZE AMBER AMBLE AMEND AMISS AMONG AMPLE AMUSE ANGEL ANGER ANGLE ANGRY ANGST ANIME
ANKLE ANNEX ANNOY ANTIC ANVIL AORTA APART APHID APPLE APPLY APRON ARBOR ARDOR ARENA ARGUE ARISE
ARMOR AROMA AROSE ARRAY ARROW ARSON ARTSY ASCOT ASHEN ASIDE ASKEW ASSET ASTER ATLAS ATOLL ATONE
ATTIC AUDIO AUDIT AUGUR AUNTS AUNTY AVAIL AVERT AVOID AWAIT AWAKE AWARD AWARE AWFUL AWOKE AXIAL
AXIOM AZURE BACON BADGE BADLY BAGEL BAGGY BAITS BAKER BAKES BALLS BALMY BANAL BANDS BANJO BARGE
BARON BASAL BASES BASIC BASIL BASIN BASIS BATCH BATHE BATHS BATON BATTY BEACH BEADS BEADY BEAKS
BEAMS BEARD BEARS BEAST BEATS BEECH BEEFY BEERS BEGAN BEGIN BEGUN BEING BELCH BELIE BELLE BELLS
BELLY BELOW BELTS BENCH BENDS BERET BERRY BERTH BESET BESTS BEVEL BIBLE BICEP BIGHT BIKES BILGE
BILLS BINDS BINGE BINGO BIRCH BIRDS BIRTH BISON BLACK BLADE BLAME BLAND BLANK BLARE BLAST BLAZE
BLEAK BLEAT BLEED BLEND BLESS BLIMP BLIND BLINK BLISS BLITZ BLOAT BLOCK BLOKE BLOND BLOOD BLOOM
BLOTS BLOWN BLOWS BLUES BLUFF BLUNT BLURB BLURT BLUSH BOARD BOAST BOATS BOBBY BOLDS BOLTS BONDS
BONES BONGO BONUS BOOKS BOOST BOOTH BOOTY BOOZE BORAX BORNE BOSOM BOSSY BOTCH BOUGH BOUND BOWEL
BOXER BRACE BRAID BRAIN BRAKE BRAND BRASH BRASS BRAVE BRAVO BRAWL BRAWN BREAD BREAK BREED BREWS
BRIAR BRIBE BRICK BRIDE BRIEF BRINE BRING BRINK BRISK BROAD BROIL BROKE BROOD BROOK BROOM BROTH
BROWN BROWS BRUNT BRUSH BRUTE BUDDY BUDGE BUGGY BUGLE BUILD BUILT BULBS BULGE BULKY BULLY BUMPS
BUNCH BUNNY BURLY BURNT BURST BUSHY BUSTS BUTCH BUYER BYLAW CABAL CABBY CABIN CABLE CACAO CACHE
CACTI CADDY CADET CAKES CALLS CAMEL CAMEO CAMPS CANAL CANDY CANNY CANOE CAPER CARAT CARDS CARGO
CAROL CARRY CARTS CARVE CASES CASTE CATCH CATER CATTY CAULK CAUSE CAVES CEASE CEDAR CELLO CELLS
CHAFE CHAFF CHAIN CHAIR CHALK CHAMP CHANT CHAOS CHARD CHARM CHART CHASE CHASM CHATS CHEAP CHEAT
CHECK CHEEK CHEER CHEFS CHESS CHEST CHEWS CHICK CHIDE CHIEF CHILD CHILI CHILL CHIME CHIMP CHINA
CHIPS CHIRP CHOIR CHOKE CHORD CHORE CHOSE CHUCK CHUMP CHUNK CHURN CHUTE CIDER CIGAR CINCH CIRCA
CIVIC CIVIL CLACK CLAIM CLAMP CLANG CLANK CLASH CLASP CLASS CLEAN CLEAR CLEAT CLEFT CLERK CLICK
CLIFF CLIMB CLING CLIPS CLOAK CLOCK CLONE CLOSE CLOTH CLOTS CLOUD CLOUT CLOWN CLUBS CLUCK CLUMP
CLUNG COACH COAST COATS COBRA COCOA COLDS COLON COLOR COLTS COMET COMFY COMIC COMMA CONCH CONDO
CONES COOLS CORAL CORNY COSTS COUCH COUGH COULD COUNT COUPE COURT COVEN COVER COVES COVET COWER
CRACK CRAFT CRAMP CRANE CRANK CRASH CRASS CRATE CRAVE CRAWL CRAZE CRAZY CREAK CREAM CREDO CREED
CREEK CREEP CREME CREPE CREPT CREST CREWS CRICK CRIED CRIME CRIMP CRISP CROAK CROCK CRONE CRONY
CROOK CROPS CROSS CROWD CROWN CROWS CRUDE CRUEL CRUMB CRUSH CRUST CRYPT CUBES CUBIC CUMIN CUPID
CURLY CURRY CURSE CURVE CYBER CYCLE CYNIC DADDY DAILY DAIRY DAISY DAMPS DANCE DANDY DARTS DATES
DATUM DEALS DEALT DEARS DEATH DEBIT DEBUG DEBUT DECAL DECAY DECOR DECOY DECRY DEEDS DEERS DEFER
DEITY DELAY DELLS DELTA DELVE DEMON DEMUR DENIM DENSE DEPOT DEPTH DERBY DESKS DETER DEVIL DIARY
DICES DICEY DIGIT DIMLY DINER DINGO DINGY DIRTY DISCO DISKS DITCH DITTO DITTY DIVER DIZZY DODGE
DOGMA DOING DOLLS DOLLY DOMES DONOR DONUT DOSES DOUBT DOUGH DOVES DOWDY DOWEL DOWRY DOZEN DRAFT
DRAIN DRAKE DRAMA DRANK DRAPE DRAWL DRAWN DREAD DREAM DRESS DREWS DRIED DRIER DRIFT DRILL DRINK
DRIPS DRIVE DROIT DROLL DRONE DROOL DROOP DROPS DROSS DROVE DROWN DRUGS DRUNK DRYER DRYLY DUCHY
DUCTS DUKES DULLS DULLY DUMMY DUMPS DUMPY DUNCE DUNES DUSKS DUSKY DUSTS DUSTY DUTCH DWARF DWELL
DYING EAGER EAGLE EARLY EARNS EARTH EASEL EASES EATEN EATER EBONY EDICT EDIFY EDITS EERIE EIGHT
EJECT ELBOW ELDER ELECT ELEGY ELFIN ELITE ELOPE ELUDE ELVES EMAIL EMBED EMBER EMPTY ENACT ENDED
ENDOW ENEMY ENJOY ENNUI ENSUE ENTER ENTRY ENVOY EPOCH EPOXY EQUAL EQUIP ERASE ERECT ERODE ERROR
ERUPT ESSAY ETHER ETHIC ETHOS EVADE EVENT EVERY EVICT EVOKE EXACT EXALT EXCEL EXERT EXILE EXIST
EXPAT EXPEL EXTOL EXTRA EXUDE EXULT FABLE FACES FACET FACTS FAINT FAIRY FAITH FALLS FALSE FAMED
FANCY FARMS FATAL FATES FATTY FAULT FAUNA FAVOR FEARS FEAST FEEDS FEIGN FELLS FELON FELTS FEMUR
FENCE FERAL FERRY FETAL FETCH FETID FETUS FEVER FEWER FIBER FIBRE FIELD FIEND FIERY FIFTH FIFTY
FIGHT FILCH FILES FILET FILLS FILLY FILMY FILTH FINAL FINCH FINDS FIRMS FIRST FISHY FISTS FIXED
FIXER FIZZY FJORD FLACK FLAIL FLAIR FLAKE FLAKY FLAME FLANK FLARE FLASH FLASK FLATS FLECK FLEES
FLEET FLESH FLICK FLIER FLING FLINT FLIRT FLOAT FLOCK FLOOD FLOOR FLORA FLOSS FLOUR FLOUT FLOWN
FLOWS FLUFF FLUID FLUKE FLUNG FLUNK FLUSH FLUTE FOAMY FOCAL FOCUS FOGGY FOIST FOLDS FOLLY FOODS
FOOLS FORAY FORCE FORGE FORGO FORMS FORTE FORTH FORTS FORTY FORUM FOUND FOURS FOYER FRAIL FRAME
FRANK FRAUD FREAK FREED FREES FRESH FRIAR FRIED FRILL FRISK FRIZZ FROCK FROND FRONT FROST FROTH
FROWN FROZE FRUIT FUDGE FUGUE FULLS FULLY FUNDS FUNGI FUNKY FUNNY FUROR FURRY FUSES FUSSY FUZZY
GAFFE GAILY GAMER GAMES GAMMA GAMUT GASSY GATES GAUDY GAUGE GAUNT GAUZE GAVEL GAWKY GAZER GEARS
GECKO GEEKY GEESE GENIE GENRE GHOST GIANT GIDDY GIFTS GIRTH GISTS GIVEN GIVER GIVES GIZMO GLADE
GLAND GLARE GLASS GLAZE GLEAM GLEAN GLEES GLIDE GLINT GLOAT GLOBE GLOOM GLORY GLOSS GLOVE GLOWS
GLYPH GNASH GNOME GOATS GODLY GOING GOLDS GOLLY GONAD GONER GONGS GOODS GOOEY GOOFY GOOSE GORGE
GOUGE GOURD GRACE GRADE GRAFT GRAIL GRAIN GRAND GRANT GRAPE GRAPH GRASP GRASS GRATE GRAVE GRAVY
GRAZE GREAT GREED GREEN GREET GRIEF GRILL GRIME GRIMY GRIND GRIPE GRIPS GRITS GROAN GROIN GROOM
GROPE GROSS GROUP GROUT GROVE GROWL GROWN GROWS GRUEL GRUFF GRUNT GUANO GUARD GUAVA GUESS GUEST
GUIDE GUILD GUILT GUISE GULCH GUMMY GUPPY GUSTO GUSTY GYPSY HABIT HAIKU HAIRY HALLS HALVE HANDS
HANDY HAPPY HARDY HAREM HARMS HARPY HARRY HARSH HASTE HASTY HATCH HATER HAUNT HAVEN HAVOC HAZEL
HEADS HEADY HEALS HEARD HEARS HEART HEATH HEATS HEAVE HEAVY HEDGE HEFTY HEIST HELLO HELPS HENCE
HERBS HERON HEROS HIDES HIKES HILLS HILLY HINGE HINTS HIPPO HIPPY HITCH HOARD HOBBY HOIST HOLDS
HOLES HOLLY HOMER HOMES HONEY HONOR HOODS HOOFS HOPES HORDE HORNY HORSE HOSES HOSTS HOTEL HOTLY
HOUND HOURS HOUSE HOVEL HOVER HOWDY HUBBY HULLS HUMAN HUMID HUMOR HUMUS HUNCH HUNKY HURRY HUSKY
HUSSY HYENA HYMEN HYPER ICIER ICING IDEAL IDIOM IDIOT IDLER IDYLL IGLOO IMAGE IMBUE IMPEL IMPLY
INANE INCUR INDEX INDIE INEPT INERT INFER INGOT INLAY INLET INNER INPUT INTER INTRO IONIC IRATE
IRONY ISLET ISSUE ITCHY ITEMS IVORY JAUNT JAZZY JEANS JELLY JENNY JERKY JEWEL JIFFY JIMMY JOINT
JOIST JOKER JOKES JOLLY JOUST JUDGE JUICE JUICY JUMBO JUMPS JUMPY JUNCO JUNKY JUROR JUSTS KARMA
KAYAK KEBAB KHAKI KILLS KINDS KINGS KINKY KIOSK KITTY KNACK KNEAD KNEED KNEEL KNEES KNELT KNIFE
KNITS KNOBS KNOCK KNOLL KNOTS KNOWN KOALA KRILL LABEL LABOR LACES LADEN LADLE LAGER LAKES LAMPS
LANCE LANDS LANKY LAPEL LAPSE LARGE LARVA LASER LASSO LATCH LATER LATES LATEX LATHE LATTE LAUGH
LAYER LEACH LEADS LEAFS LEAFY LEAKS LEAKY LEANT LEAPT LEARN LEASE LEASH LEAST LEAVE LEDGE LEECH
LEERY LEGAL LEGGY LEMON LEMUR LENDS LEPER LEVEL LEVER LIBEL LIFTS LIGHT LIKEN LIKES LILAC LIMBO
LIMIT LINED LINEN LINER LINES LINGO LIPID LISTS LITER LITHE LIVED LIVEN LIVER LIVES LIVID LLAMA
LOAFS LOAMY LOATH LOBBY LOCAL LOCUS LODGE LOFTS LOFTY LOGIC LOGIN LOGOS LOINS LONER LONGS LOOKS
LOOPY LOOSE LORRY LOSER LOSTS LOUSE LOUSY LOVED LOVER LOVES LOWER LOWLY LOYAL LUCID LUCKY LUMEN
LUMPY LUNAR LUNCH LUNGE LUSTY LYING LYMPH LYNCH LYRIC MACAW MACHO MACRO MADAM MADLY MAFIA MAGIC
MAGMA MAIZE MAJOR MAKER MAKES MALES MALLS MAMBO MAMMA MANGA MANGE MANGO MANGY MANIA MANIC MANLY
MANOR MAPLE MARCH MARRY MARSH MARTS MASKS MASON MATCH MATER MATES MATEY MATHS MAUVE MAXIM MAYBE
MAYOR MEALS MEALY MEANT MEATS MEATY MECCA MEDAL MEDIA MEDIC MEEKS MELEE MELON MELTS MEMOS MENDS
MERCY MERGE MERIT MERRY MESSY METAL METER METRO MICES MICRO MIDST MIGHT MILKS MILKY MILLS MIMIC
MINCE MINDS MINED MINER MINES MINIM MINOR MINTS MINTY MINUS MIRTH MISER MISSY MISTS MISTY MITER
MIXED MIXER MOATS MODEL MODEM MOGUL MOIST MOLAR MOLDY MONEY MONTH MOOCH MOODS MOODY MOOSE MOPED
MORAL MORON MORPH MOSSY MOTEL MOTHS MOTIF MOTOR MOTTO MOULT MOUND MOUNT MOURN MOUSE MOUSY MOUTH
MOVED MOVER MOVES MOVIE MOWER MUCKY MUCUS MUDDY MULCH MUMMY MUNCH MURAL MURKY MUSES MUSHY MUSIC
MUSKY MUSTS MUSTY MYRRH NADIR NAIVE NAMED NAMES NANNY NASAL NASTY NATAL NAVAL NAVEL NEARS NEATS
NEEDS NEEDY NEIGH NERVE NERVY NESTS NEVER NEWER NEWLY NEXTS NICER NICES NICHE NIECE NIFTY NIGHT
NINJA NINNY NINTH NIPPY NOBLE NOBLY NOISE NOISY NOMAD NOOSE NORTH NOSES NOTCH NOTED NOTES NOVEL
NUDGE NURSE NUTTY NYLON NYMPH OAKEN OASIS OCCUR OCEAN OCTET ODDER ODDLY OFFAL OFFER OFTEN OILED
OLDEN OLDER OLIVE OMEGA ONION ONSET OPERA OPTIC ORBIT ORDER ORGAN OTHER OTTER OUGHT OUNCE OUTDO
OUTER OUTGO OVARY OVERT OWING OWNER OXIDE OZONE PACES PACTS PADDY PAGAN PAINT PALES PANDA PANEL
PANIC PANSY PANTS PAPAL PAPER PARKA PARSE PARTS PARTY PASTA PASTE PASTY PATCH PATHS PATIO PATSY
PATTY PAUSE PAVES PAYEE PAYER PEACE PEACH PEAKS PEARL PEARS PECAN PEDAL PEEKS PEERS PELTS PENAL
PENNY PERCH PERIL PERKY PESKY PESTO PESTS PETAL PETTY PHASE PHONE PHONY PHOTO PIANO PICKY PIECE
PIETY PIGGY PILLS PILOT PINCH PINEY PINKY PINTO PINTS PIOUS PIPER PITCH PITHY PIVOT PIXEL PIXIE
PIZZA PLACE PLAID PLAIN PLANE PLANK PLANS PLANT PLATE PLAZA PLEAD PLEAS PLEAT PLIED PLIER PLODS
PLOTS PLOWS PLUCK PLUMB PLUME PLUMP PLUNK PLUSH POACH POEMS POINT POISE POKER POLAR POLES POLKA
POLLS POLYP PONDS POOCH POOLS POPPY PORCH PORTS POSER POSES POSIT POSSE POSTS POUCH POUND POURS
POWER PRANK PRAWN PREEN PRESS PRICE PRICK PRIDE PRIED PRIME PRIMO PRINT PRIOR PRISM PRIVY PRIZE
PROBE PROMO PRONE PRONG PROOF PROSE PROUD PROVE PROWL PROXY PRUDE PRUNE PSALM PUBIC PUDGY PULLS
PULSE PUMPS PUNCH PUPIL PUPPY PUREE PURGE PURSE PUSHY PUTTY PYGMY QUACK QUAFF QUAIL QUAKE QUALM
QUARK QUART QUASI QUEEN QUERY QUEST QUEUE QUICK QUIET QUILL QUILT QUIRK QUITE QUITS QUOTA QUOTE
RABBI RABID RACER RACES RADAR RADII RADIO RADON RAFTS RAINY RAISE RAJAH RAKES RALLY RAMPS RANCH
RANDY RANGE RAPID RASPY RATES RATIO RATTY RAVEN RAVES RAYON RAZOR REACH REACT READS READY REALM
REALS REAMS REAST REBEL REBUT RECAP RECUR REDUX REFER REGAL REHAB REIGN RELAX RELAY RELIC REMIT
REMIX RENAL RENEW REPAY REPEL REPLY RERUN RESET RESIN RESTS RETCH RETRO RETRY REUSE REVEL RHINO
RHYME RICES RIDER RIDES RIDGE RIFLE RIGHT RIGID RIGOR RINGS RINSE RIPEN RISEN RISER RISKS RISKY
RITZY RIVAL RIVER RIVET ROACH ROAST ROBIN ROBOT ROCKS ROCKY RODEO ROGER ROGUE ROLES ROLLS ROOFS
ROOMY ROOST ROSES ROTOR ROUGE ROUGH ROUND ROUSE ROUTE ROWDY ROWED ROWER ROYAL RUDDY RUDER RUGBY
RUINS RULED RULER RULES RUMBA RUMOR RUPEE RURAL RUSES RUSTS RUSTY SADLY SAFER SAINT SAKER SALAD
SALES SALET SALLY SALON SALSA SALTY SALVE SALVO SANDS SANDY SANER SAPPY SASSY SATIN SATYR SAUCE
SAUCY SAUNA SAUTE SAVED SAVER SAVES SAVOR SAVOY SAVVY SCALD SCALE SCALP SCALY SCAMP SCANT SCARE
SCARF SCARY SCENE SCENT SCION SCOFF SCOLD SCONE SCOOP SCOPE SCORE SCORN SCOUR SCOUT SCOWL SCRAM
SCRAP SCREE SCREW SCRUB SEALS SEAMS SEAMY SEATS SEDAN SEEDS SEEDY SEEKS SEGUE SEIZE SELLS SEMEN
SENDS SENSE SEPIA SERUM SERVE SETUP SEVEN SEVER SEWER SHACK SHADE SHADY SHAFT SHAKE SHAKY SHALL
SHAME SHANK SHAPE SHARD SHARE SHARK SHARP SHAVE SHAWL SHEAR SHEEN SHEEP SHEER SHEET SHELF SHELL
SHIFT SHINE SHINY SHIPS SHIRE SHIRK SHIRT SHOCK SHONE SHOOK SHOOT SHOPS SHORE SHORT SHOTS SHOUT
SHOVE SHOWN SHOWS SHOWY SHREW SHRUB SHRUG SHUCK SHUNT SHUSH SHYLY SIDES SIEGE SIGHT SIGMA SILKS
SILKY SILLY SINCE SINEW SINGE SINGS SIREN SISSY SIXTH SIXTY SIZED SIZER SIZES SKATE SKEET SKEIN
SKIER SKIES SKIFF SKILL SKIMP SKIPS SKIRT SKULK SKULL SKUNK SLACK SLAIN SLANG SLANT SLASH SLATE
SLAVE SLEEK SLEEP SLEET SLEPT SLICE SLICK SLIDE SLIME SLIMY SLING SLINK SLIPS SLOPE SLOSH SLOTH
SLOTS SLOWS SLUMP SLUNG SLUNK SLURP SLUSH SLYLY SMACK SMALL SMART SMASH SMEAR SMELL SMELT SMILE
SMIRK SMITE SMITH SMOCK SMOKE SMOKY SNACK SNAFU SNAIL SNAKE SNAKY SNAPS SNARE SNARL SNEAK SNEER
SNIDE SNIFF SNIPE SNOBS SNOOP SNORE SNORT SNOUT SNOWS SNOWY SNUCK SNUFF SOAPY SOBER SOFTS SOLAR
SOLDS SOLES SOLID SOLVE SONAR SONGS SONIC SOOTH SOOTY SORRY SORTS SOUND SOURS SOUTH SOWED SOWER
SPACE SPADE SPANK SPARE SPARK SPASM SPAWN SPEAK SPEAR SPECK SPEED SPELL SPEND SPENT SPICE SPICY
SPIED SPIEL SPIKE SPILL SPINE SPINY SPIRE SPITE SPLAT SPLIT SPOIL SPOKE SPOOF SPOOK SPOOL SPOON
SPORE SPORT SPOTS SPOUT SPRAY SPREE SPRIG SPUNK SPURN SPURT SQUAD SQUAT SQUID STACK STAFF STAGE
STAID STAIN STAIR STAKE STALE STALK STALL STAMP STAND STANK STAPH STARE STARK STARS START STASH
STATE STAVE STAYS STEAD STEAK STEAL STEAM STEEL STEEP STEER STEIN STEMS STEPS STERN STEWS STICK
STIFF STILL STILT STING STINK STINT STOCK STOIC STOKE STOLE STOMP STONE STONY STOOD STOOL STOOP
STOPS STORE STORK STORM STORY STOUT STOVE STRAP STRAW STRAY STREP STREW STRIP STRUT STUCK STUDS
STUDY STUFF STUMP STUNG STUNK STUNT STYLE SUAVE SUGAR SUITE SUITS SULKY SULLY SUNNY SUPER SURER
SURGE SURLY SUSHI SWAMI SWAMP SWANK SWARM SWASH SWATH SWEAR SWEAT SWEEP SWEET SWELL SWEPT SWIFT
SWILL SWINE SWING SWIPE SWIRL SWISH SWISS SWOON SWOOP SWORD SWORE SWORN SWUNG TABBY TABLE TABOO
TACIT TACKY TAFFY TAINT TAKEN TAKER TAKES TALES TALKS TALLS TALLY TALON TAMED TAMER TANGO TANGY
TAPER TAPIR TARDY TARES TAROT TASKS TASTE TASTY TATTY TAUNT TAWNY TEACH TEAMS TEARS TEARY TEASE
TEDDY TEEMS TEENS TEENY TEETH TELLS TEMPO TEMPT TENDS TENOR TENSE TENTH TENTS TEPEE TEPID TERMS
TERRA TERSE TESTS TESTY TEXTS THANK THEFT THEIR THEME THERE THESE THICK THIEF THIGH THING THINK
THIRD THONG THORN THOSE THREE THREW THROB THROW THRUM THUDS THUMB THUMP TIARA TIBIA TIDAL TIDES
TIGER TIGHT TILDE TILES TIMER TIMES TIMID TINTS TIPSY TITAN TITLE TOAST TODAY TODDY TOKEN TOLDS
TOLLS TONAL TONED TONER TONES TONGS TONIC TOOLS TOOTH TOPAZ TOPIC TORCH TORSO TOTAL TOTEM TOUCH
TOUGH TOURS TOWEL TOWER TOWNS TOXIC TRACE TRACK TRACT TRADE TRAIL TRAIN TRAIT TRAMP TRAPS TRASH
TRAWL TREAD TREAT TREES TREND TRESS TRIAD TRIAL TRIBE TRICK TRIED TRIER TRIES TRILL TRIMS TRIPE
TRIPS TRITE TROLL TROMP TROOP TROPE TROTH TROTS TROUT TROVE TRUCE TRUCK TRUER TRULY TRUMP TRUNK
TRUSS TRUST TRUTH TRYST TUBAL TUBES TULIP TUMOR TUNED TUNER TUNES TUNIC TURBO TURNS TUTOR TWAIN
TWANG TWEAK TWEED TWEET TWICE TWIGS TWILL TWINE TWINS TWIRL TWIST TYING UDDER ULCER ULTRA UMBRA
UNCLE UNCUT UNDER UNDID UNDUE UNFED UNFIT UNIFY UNION UNITE UNITS UNITY UNLIT UNMET UNTIE UNTIL
UNWED UNZIP UPPER UPSET URBAN URINE USAGE USHER USING USUAL USURP UTTER VAGUE VALET VALID VALOR
VALUE VALVE VAPID VAPOR VASES VAULT VAUNT VEGAN VEILS VENOM VENUE VERBS VERGE VERSE VESTS VICAR
VIDEO VIEWS VIGIL VIGOR VILLA VINES VINYL VIOLA VIPER VIRAL VIRUS VISIT VISOR VISTA VITAL VIVID
VIXEN VOCAL VODKA VOGUE VOICE VOILA VOMIT VOTED VOTER VOTES VOUCH VOWEL VYING WACKY WADED WADER
WAFER WAGED WAGER WAGES WAGON WAIST WAITS WAIVE WAKES WALKS WALLS WALTZ WANDS WANTS WARMS WARTS
WARTY WASTE WATCH WATER WATTS WAVED WAVER WAVES WAXED WAXEN WEAKS WEARS WEARY WEAVE WEDGE WEEDS
WEEDY WEEKS WEIGH WEIRD WELLS WELSH WENCH WESTS WHACK WHALE WHARF WHEAT WHEEL WHELP WHERE WHICH
WHIFF WHILE WHIMS WHINE WHINY WHIRL WHISK WHITE WHOLE WHOOP WHOSE WIDEN WIDER WIDES WIDOW WIDTH
WIELD WILLS WINCE WINCH WINDS WINDY WINES WINGS WIPED WIPER WIRED WIRES WISER WISPY WITCH WITTY
WIVES WOKEN WOMAN WOMEN WOODS WOODY WOOLS WOOZY WORDS WORDY WORKS WORLD WORMS WORRY WORSE WORST
WORTH WOULD WOUND WOVEN WRACK WRATH WREAK WRECK WREST WRING WRIST WRITE WRONG WROTE WRUNG YACHT
YEARN YEARS YEAST YELLS YIELD YOUNG YOURS YOUTH ZEBRA ZEROS ZESTY ZONAL ZONES
"""


def _clean(words: Iterable[str]) -> FrozenSet[str]:
    return frozenset(
        w.strip().upper() for w in words
        if len(w.strip()) == 5 and w.strip().isascii() and w.strip().isalpha()
    )


@lru_cache(maxsize=1)
def load_dictionary() -> FrozenSet[str]:
    words = set(_clean(_BUNDLED.split())) | set(_clean(FALLBACK_WORDS))
    if WORDLE_DICTIONARY_PATH:
        try:
            with open(WORDLE_DICTIONARY_PATH, "r", encoding="utf-8") as f:
                words |= _clean(f.read().split())
        except OSError:
            logging.exception("Could not read WORDLE_DICTIONARY_PATH=%s", WORDLE_DICTIONARY_PATH)
    return frozenset(words)


def is_valid_word(word: str) -> bool:
    return (word or "").strip().upper() in load_dictionary()
