"""Canonical catalog lists shipped with the application."""

from __future__ import annotations

from typing import Iterable, Iterator
from urllib.parse import quote

from .models import CuratedList, Film, ListCategory, Tier
from .utils import clean_title, title_hash


PLACEHOLDER_POSTER_URL = (
    "https://placehold.co/600x900/F5C71A/000000?text={title}&font=oswald"
)
MIN_CATALOG_RUNTIME = 85
CATALOG_RUNTIME_SPREAD = 95


def catalog_runtime(title: str) -> int:
    """Deterministic runtime, in minutes, assigned to a shipped film."""

    return MIN_CATALOG_RUNTIME + title_hash(title) % CATALOG_RUNTIME_SPREAD


def create_film(
    title: str,
    year: int,
    director: str = "Unknown",
    poster_url: str | None = None,
) -> Film:
    """Build a catalog film with a placeholder poster when none is known."""

    cleaned = clean_title(title)
    poster = PLACEHOLDER_POSTER_URL.format(title=quote(cleaned.upper()))
    if poster_url and poster_url.startswith("http"):
        poster = poster_url
    return Film(
        title=cleaned,
        year=year,
        director=director,
        poster_url=poster,
        runtime=catalog_runtime(cleaned),
    )


def create_tier(level: int, name: str, films: Iterable[Film]) -> Tier:
    return Tier(level=level, name=name, films=list(films))


KUBRICK = CuratedList(
    id="kubrick",
    title="STANLEY KUBRICK",
    subtitle="The Perfectionist",
    description="Mastering cinematic symmetry.",
    tiers=[
        create_tier(1, "LEVEL 1: THE HOOK", [
            create_film("The Shining", 1980, "Kubrick"),
            create_film("Full Metal Jacket", 1987, "Kubrick"),
        ]),
        create_tier(2, "LEVEL 2: SATIRE", [
            create_film("Dr. Strangelove", 1964, "Kubrick"),
            create_film("Lolita", 1962, "Kubrick"),
        ]),
        create_tier(3, "LEVEL 3: FUTURE SHOCK", [
            create_film("A Clockwork Orange", 1971, "Kubrick"),
            create_film("2001: A Space Odyssey", 1968, "Kubrick"),
        ]),
        create_tier(4, "LEVEL 4: THE HEIST", [
            create_film("The Killing", 1956, "Kubrick"),
            create_film("Killer's Kiss", 1955, "Kubrick"),
        ]),
        create_tier(5, "LEVEL 5: WAR & GLORY", [
            create_film("Paths of Glory", 1957, "Kubrick"),
            create_film("Spartacus", 1960, "Kubrick"),
        ]),
        create_tier(6, "LEVEL 6: PERIOD PIECES", [
            create_film("Barry Lyndon", 1975, "Kubrick"),
        ]),
        create_tier(7, "FINAL BOSS: THE DREAM", [
            create_film("Eyes Wide Shut", 1999, "Kubrick"),
            create_film("Fear and Desire", 1953, "Kubrick"),
        ]),
    ],
)

TARANTINO = CuratedList(
    id="tarantino",
    title="QUENTIN TARANTINO",
    subtitle="The Remix King",
    tiers=[
        create_tier(1, "LEVEL 1: POP HITS", [
            create_film("Django Unchained", 2012, "Tarantino"),
            create_film("Inglourious Basterds", 2009, "Tarantino"),
        ]),
        create_tier(2, "LEVEL 2: THE ESSENCE", [
            create_film("Pulp Fiction", 1994, "Tarantino"),
            create_film("Reservoir Dogs", 1992, "Tarantino"),
        ]),
        create_tier(3, "LEVEL 3: VENGEANCE", [
            create_film("Kill Bill: Vol. 1", 2003, "Tarantino"),
            create_film("Kill Bill: Vol. 2", 2004, "Tarantino"),
        ]),
        create_tier(4, "LEVEL 4: CHARACTER STUDY", [
            create_film("Jackie Brown", 1997, "Tarantino"),
            create_film("Once Upon a Time in Hollywood", 2019, "Tarantino"),
        ]),
        create_tier(5, "LEVEL 5: DIALOGUE", [
            create_film("The Hateful Eight", 2015, "Tarantino"),
            create_film("Death Proof", 2007, "Tarantino"),
        ]),
        create_tier(6, "SIDE QUESTS", [
            create_film("Four Rooms", 1995, "Tarantino"),
            create_film("My Best Friend's Birthday", 1987, "Tarantino"),
        ]),
    ],
)

HITCHCOCK = CuratedList(
    id="hitchcock",
    title="ALFRED HITCHCOCK",
    subtitle="Master of Suspense",
    tiers=[
        create_tier(1, "LEVEL 1: THE BIG THREE", [
            create_film("Psycho", 1960, "Hitchcock"),
            create_film("Vertigo", 1958, "Hitchcock"),
            create_film("Rear Window", 1954, "Hitchcock"),
        ]),
        create_tier(2, "LEVEL 2: THE CHASE", [
            create_film("North by Northwest", 1959, "Hitchcock"),
            create_film("The 39 Steps", 1935, "Hitchcock"),
            create_film("To Catch a Thief", 1955, "Hitchcock"),
        ]),
        create_tier(3, "LEVEL 3: MURDER", [
            create_film("Strangers on a Train", 1951, "Hitchcock"),
            create_film("Dial M for Murder", 1954, "Hitchcock"),
            create_film("Rope", 1948, "Hitchcock"),
        ]),
        create_tier(4, "LEVEL 4: GASLIGHT", [
            create_film("Rebecca", 1940, "Hitchcock"),
            create_film("Notorious", 1946, "Hitchcock"),
            create_film("Suspicion", 1941, "Hitchcock"),
        ]),
        create_tier(5, "LEVEL 5: UNSETTLING", [
            create_film("The Birds", 1963, "Hitchcock"),
            create_film("Shadow of a Doubt", 1943, "Hitchcock"),
            create_film("Frenzy", 1972, "Hitchcock"),
        ]),
        create_tier(6, "LEVEL 6: BRITISH ROOTS", [
            create_film("The Lady Vanishes", 1938, "Hitchcock"),
            create_film("Sabotage", 1936, "Hitchcock"),
            create_film("The Lodger", 1927, "Hitchcock"),
        ]),
        create_tier(7, "LEVEL 7: DEEP DIVE", [
            create_film("Marnie", 1964, "Hitchcock"),
            create_film("Topaz", 1969, "Hitchcock"),
            create_film("Family Plot", 1976, "Hitchcock"),
            create_film("Lifeboat", 1944, "Hitchcock"),
        ]),
    ],
)

SCORSESE = CuratedList(
    id="scorsese",
    title="MARTIN SCORSESE",
    subtitle="Cinema Itself",
    tiers=[
        create_tier(1, "LEVEL 1: MODERN HITS", [
            create_film("The Wolf of Wall Street", 2013, "Scorsese"),
            create_film("The Departed", 2006, "Scorsese"),
        ]),
        create_tier(2, "LEVEL 2: STREET CRIME", [
            create_film("Taxi Driver", 1976, "Scorsese"),
            create_film("Mean Streets", 1973, "Scorsese"),
            create_film("Gangs of New York", 2002, "Scorsese"),
        ]),
        create_tier(3, "LEVEL 3: MOB EPICS", [
            create_film("Goodfellas", 1990, "Scorsese"),
            create_film("Casino", 1995, "Scorsese"),
            create_film("The Irishman", 2019, "Scorsese"),
        ]),
        create_tier(4, "LEVEL 4: THE SOUL", [
            create_film("Raging Bull", 1980, "Scorsese"),
            create_film("The King of Comedy", 1982, "Scorsese"),
            create_film("The Aviator", 2004, "Scorsese"),
        ]),
        create_tier(5, "LEVEL 5: FAITH", [
            create_film("Silence", 2016, "Scorsese"),
            create_film("The Last Temptation of Christ", 1988, "Scorsese"),
            create_film("Kundun", 1997, "Scorsese"),
        ]),
        create_tier(6, "LEVEL 6: DEEP DIVE", [
            create_film("After Hours", 1985, "Scorsese"),
            create_film("The Age of Innocence", 1993, "Scorsese"),
            create_film("Hugo", 2011, "Scorsese"),
            create_film("Shutter Island", 2010, "Scorsese"),
        ]),
    ],
)

SPIELBERG = CuratedList(
    id="spielberg",
    title="STEVEN SPIELBERG",
    subtitle="The Blockbuster",
    tiers=[
        create_tier(1, "LEVEL 1: WONDER", [
            create_film("Jurassic Park", 1993, "Spielberg"),
            create_film("E.T.", 1982, "Spielberg"),
            create_film("Hook", 1991, "Spielberg"),
        ]),
        create_tier(2, "LEVEL 2: ADVENTURE", [
            create_film("Raiders of the Lost Ark", 1981, "Spielberg"),
            create_film("Last Crusade", 1989, "Spielberg"),
            create_film("Temple of Doom", 1984, "Spielberg"),
        ]),
        create_tier(3, "LEVEL 3: HISTORY", [
            create_film("Schindler's List", 1993, "Spielberg"),
            create_film("Saving Private Ryan", 1998, "Spielberg"),
            create_film("Lincoln", 2012, "Spielberg"),
        ]),
        create_tier(4, "LEVEL 4: THE SHARK", [
            create_film("Jaws", 1975, "Spielberg"),
            create_film("Duel", 1971, "Spielberg"),
        ]),
        create_tier(5, "LEVEL 5: NEAR FUTURE", [
            create_film("Minority Report", 2002, "Spielberg"),
            create_film("A.I.", 2001, "Spielberg"),
            create_film("Ready Player One", 2018, "Spielberg"),
        ]),
        create_tier(6, "LEVEL 6: CONTACT", [
            create_film("Close Encounters", 1977, "Spielberg"),
            create_film("War of the Worlds", 2005, "Spielberg"),
        ]),
        create_tier(7, "LEVEL 7: DRAMA", [
            create_film("The Color Purple", 1985, "Spielberg"),
            create_film("Empire of the Sun", 1987, "Spielberg"),
            create_film("The Fabelmans", 2022, "Spielberg"),
        ]),
        create_tier(8, "LEVEL 8: POLITICS", [
            create_film("Munich", 2005, "Spielberg"),
            create_film("Bridge of Spies", 2015, "Spielberg"),
            create_film("The Post", 2017, "Spielberg"),
        ]),
    ],
)

KUROSAWA = CuratedList(
    id="kurosawa",
    title="AKIRA KUROSAWA",
    subtitle="The Sensei",
    tiers=[
        create_tier(1, "LEVEL 1: RONIN", [
            create_film("Yojimbo", 1961, "Kurosawa"),
            create_film("Sanjuro", 1962, "Kurosawa"),
        ]),
        create_tier(2, "LEVEL 2: THE LEGEND", [
            create_film("Seven Samurai", 1954, "Kurosawa"),
            create_film("The Hidden Fortress", 1958, "Kurosawa"),
        ]),
        create_tier(3, "LEVEL 3: TRUTH", [
            create_film("Rashomon", 1950, "Kurosawa"),
            create_film("High and Low", 1963, "Kurosawa"),
        ]),
        create_tier(4, "LEVEL 4: SHAKESPEARE", [
            create_film("Ran", 1985, "Kurosawa"),
            create_film("Throne of Blood", 1957, "Kurosawa"),
            create_film("The Bad Sleep Well", 1960, "Kurosawa"),
        ]),
        create_tier(5, "LEVEL 5: HUMANISM", [
            create_film("Ikiru", 1952, "Kurosawa"),
            create_film("Red Beard", 1965, "Kurosawa"),
        ]),
        create_tier(6, "LEVEL 6: NOIR", [
            create_film("Stray Dog", 1949, "Kurosawa"),
            create_film("Drunken Angel", 1948, "Kurosawa"),
        ]),
        create_tier(7, "LEVEL 7: COLOR", [
            create_film("Kagemusha", 1980, "Kurosawa"),
            create_film("Dreams", 1990, "Kurosawa"),
        ]),
        create_tier(8, "LEVEL 8: DEEP DIVE", [
            create_film("Dersu Uzala", 1975, "Kurosawa"),
            create_film("Madadayo", 1993, "Kurosawa"),
        ]),
    ],
)

BERGMAN = CuratedList(
    id="bergman",
    title="INGMAR BERGMAN",
    subtitle="The Existentialist",
    tiers=[
        create_tier(1, "LEVEL 1: THE ENTRY", [
            create_film("The Seventh Seal", 1957, "Bergman"),
            create_film("Wild Strawberries", 1957, "Bergman"),
        ]),
        create_tier(2, "LEVEL 2: THE FACE", [
            create_film("Persona", 1966, "Bergman"),
            create_film("Cries and Whispers", 1972, "Bergman"),
        ]),
        create_tier(3, "LEVEL 3: SILENCE OF GOD", [
            create_film("Through a Glass Darkly", 1961, "Bergman"),
            create_film("Winter Light", 1963, "Bergman"),
            create_film("The Silence", 1963, "Bergman"),
        ]),
        create_tier(4, "LEVEL 4: MARRIAGE", [
            create_film("Scenes from a Marriage", 1973, "Bergman"),
            create_film("Fanny and Alexander", 1982, "Bergman"),
        ]),
        create_tier(5, "LEVEL 5: SUMMER", [
            create_film("Summer with Monika", 1953, "Bergman"),
            create_film("Smiles of a Summer Night", 1955, "Bergman"),
        ]),
        create_tier(6, "LEVEL 6: FOLKLORE", [
            create_film("The Virgin Spring", 1960, "Bergman"),
            create_film("The Magician", 1958, "Bergman"),
        ]),
        create_tier(7, "LEVEL 7: ISLAND", [
            create_film("Hour of the Wolf", 1968, "Bergman"),
            create_film("Shame", 1968, "Bergman"),
            create_film("The Passion of Anna", 1969, "Bergman"),
        ]),
        create_tier(8, "LEVEL 8: FINAL BOW", [
            create_film("Saraband", 2003, "Bergman"),
            create_film("Autumn Sonata", 1978, "Bergman"),
        ]),
    ],
)

LYNCH = CuratedList(
    id="lynch",
    title="DAVID LYNCH",
    subtitle="The Dreamer",
    tiers=[
        create_tier(1, "LEVEL 1: THE HOOK", [
            create_film("Mulholland Drive", 2001, "Lynch"),
            create_film("Blue Velvet", 1986, "Lynch"),
        ]),
        create_tier(2, "LEVEL 2: THE CORE", [
            create_film("Eraserhead", 1977, "Lynch"),
            create_film("The Elephant Man", 1980, "Lynch"),
            create_film("Wild at Heart", 1990, "Lynch"),
        ]),
        create_tier(3, "LEVEL 3: TWIN PEAKS", [
            create_film("Twin Peaks: Fire Walk with Me", 1992, "Lynch"),
            create_film("Twin Peaks: The Return", 2017, "Series"),
        ]),
        create_tier(4, "LEVEL 4: IDENTITY", [
            create_film("Lost Highway", 1997, "Lynch"),
            create_film("Inland Empire", 2006, "Lynch"),
        ]),
        create_tier(5, "LEVEL 5: STRAIGHT", [
            create_film("The Straight Story", 1999, "Lynch"),
            create_film("Dune", 1984, "Lynch"),
        ]),
    ],
)

PT_ANDERSON = CuratedList(
    id="pta",
    title="PAUL THOMAS ANDERSON",
    subtitle="The Virtuoso",
    tiers=[
        create_tier(1, "LEVEL 1: ENSEMBLES", [
            create_film("Boogie Nights", 1997, "P.T. Anderson"),
            create_film("Magnolia", 1999, "P.T. Anderson"),
        ]),
        create_tier(2, "LEVEL 2: MASTERPIECES", [
            create_film("There Will Be Blood", 2007, "P.T. Anderson"),
            create_film("The Master", 2012, "P.T. Anderson"),
            create_film("Phantom Thread", 2017, "P.T. Anderson"),
        ]),
        create_tier(3, "LEVEL 3: ROMANCE", [
            create_film("Punch-Drunk Love", 2002, "P.T. Anderson"),
            create_film("Licorice Pizza", 2021, "P.T. Anderson"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Inherent Vice", 2014, "P.T. Anderson"),
            create_film("Hard Eight", 1996, "P.T. Anderson"),
        ]),
    ],
)

FINCHER = CuratedList(
    id="fincher",
    title="DAVID FINCHER",
    subtitle="The Obsessive",
    tiers=[
        create_tier(1, "LEVEL 1: CULT HITS", [
            create_film("Fight Club", 1999, "Fincher"),
            create_film("Se7en", 1995, "Fincher"),
        ]),
        create_tier(2, "LEVEL 2: PROCEDURAL", [
            create_film("Zodiac", 2007, "Fincher"),
            create_film("The Social Network", 2010, "Fincher"),
        ]),
        create_tier(3, "LEVEL 3: THRILLERS", [
            create_film("Gone Girl", 2014, "Fincher"),
            create_film("The Girl with the Dragon Tattoo", 2011, "Fincher"),
            create_film("The Game", 1997, "Fincher"),
        ]),
        create_tier(4, "LEVEL 4: TECH", [
            create_film("The Curious Case of Benjamin Button", 2008, "Fincher"),
            create_film("Panic Room", 2002, "Fincher"),
            create_film("The Killer", 2023, "Fincher"),
        ]),
        create_tier(5, "LEVEL 5: DEEP DIVE", [
            create_film("Mank", 2020, "Fincher"),
            create_film("Alien 3", 1992, "Fincher"),
        ]),
    ],
)

WES_ANDERSON = CuratedList(
    id="wes",
    title="WES ANDERSON",
    subtitle="The Architect",
    tiers=[
        create_tier(1, "LEVEL 1: PEAK STYLE", [
            create_film("The Grand Budapest Hotel", 2014, "Wes Anderson"),
            create_film("Moonrise Kingdom", 2012, "Wes Anderson"),
            create_film("The Royal Tenenbaums", 2001, "Wes Anderson"),
        ]),
        create_tier(2, "LEVEL 2: ANIMATION", [
            create_film("Fantastic Mr. Fox", 2009, "Wes Anderson"),
            create_film("Isle of Dogs", 2018, "Wes Anderson"),
        ]),
        create_tier(3, "LEVEL 3: ORIGINS", [
            create_film("Rushmore", 1998, "Wes Anderson"),
            create_film("Bottle Rocket", 1996, "Wes Anderson"),
        ]),
        create_tier(4, "LEVEL 4: ENSEMBLES", [
            create_film("The Life Aquatic", 2004, "Wes Anderson"),
            create_film("The Darjeeling Limited", 2007, "Wes Anderson"),
        ]),
        create_tier(5, "LEVEL 5: META", [
            create_film("The French Dispatch", 2021, "Wes Anderson"),
            create_film("Asteroid City", 2023, "Wes Anderson"),
        ]),
    ],
)

NOLAN = CuratedList(
    id="nolan",
    title="CHRISTOPHER NOLAN",
    subtitle="The Timekeeper",
    tiers=[
        create_tier(1, "LEVEL 1: BLOCKBUSTERS", [
            create_film("Inception", 2010, "Nolan"),
            create_film("The Dark Knight", 2008, "Nolan"),
            create_film("Interstellar", 2014, "Nolan"),
        ]),
        create_tier(2, "LEVEL 2: PUZZLES", [
            create_film("The Prestige", 2006, "Nolan"),
            create_film("Memento", 2000, "Nolan"),
            create_film("Tenet", 2020, "Nolan"),
        ]),
        create_tier(3, "LEVEL 3: HISTORY", [
            create_film("Oppenheimer", 2023, "Nolan"),
            create_film("Dunkirk", 2017, "Nolan"),
        ]),
        create_tier(4, "LEVEL 4: ORIGINS", [
            create_film("Batman Begins", 2005, "Nolan"),
            create_film("Insomnia", 2002, "Nolan"),
            create_film("Following", 1998, "Nolan"),
        ]),
    ],
)

RIDLEY_SCOTT = CuratedList(
    id="ridley",
    title="RIDLEY SCOTT",
    subtitle="The World Builder",
    tiers=[
        create_tier(1, "LEVEL 1: SCI-FI ICONS", [
            create_film("Alien", 1979, "Scott"),
            create_film("Blade Runner", 1982, "Scott"),
            create_film("The Martian", 2015, "Scott"),
        ]),
        create_tier(2, "LEVEL 2: EPICS", [
            create_film("Gladiator", 2000, "Scott"),
            create_film("Kingdom of Heaven", 2005, "Scott"),
            create_film("Black Hawk Down", 2001, "Scott"),
        ]),
        create_tier(3, "LEVEL 3: CLASSICS", [
            create_film("Thelma & Louise", 1991, "Scott"),
            create_film("American Gangster", 2007, "Scott"),
            create_film("The Duellists", 1977, "Scott"),
        ]),
        create_tier(4, "LEVEL 4: POLARIZING", [
            create_film("Prometheus", 2012, "Scott"),
            create_film("Hannibal", 2001, "Scott"),
            create_film("The Last Duel", 2021, "Scott"),
        ]),
        create_tier(5, "LEVEL 5: DEEP DIVE", [
            create_film("Legend", 1985, "Scott"),
            create_film("Matchstick Men", 2003, "Scott"),
            create_film("House of Gucci", 2021, "Scott"),
        ]),
    ],
)

FELLINI = CuratedList(
    id="fellini",
    title="FEDERICO FELLINI",
    subtitle="The Ringmaster",
    tiers=[
        create_tier(1, "LEVEL 1: THE ICONS", [
            create_film("La Dolce Vita", 1960, "Fellini"),
            create_film("8 1/2", 1963, "Fellini"),
        ]),
        create_tier(2, "LEVEL 2: ROOTS", [
            create_film("La Strada", 1954, "Fellini"),
            create_film("Nights of Cabiria", 1957, "Fellini"),
            create_film("I Vitelloni", 1953, "Fellini"),
        ]),
        create_tier(3, "LEVEL 3: MEMORY", [
            create_film("Amarcord", 1973, "Fellini"),
            create_film("Roma", 1972, "Fellini"),
            create_film("Juliet of the Spirits", 1965, "Fellini"),
        ]),
        create_tier(4, "LEVEL 4: EXCESS", [
            create_film("Satyricon", 1969, "Fellini"),
            create_film("Casanova", 1976, "Fellini"),
            create_film("City of Women", 1980, "Fellini"),
        ]),
        create_tier(5, "LEVEL 5: FINAL", [
            create_film("And the Ship Sails On", 1983, "Fellini"),
            create_film("Ginger and Fred", 1986, "Fellini"),
            create_film("Il Bidone", 1955, "Fellini"),
        ]),
    ],
)

HANEKE = CuratedList(
    id="haneke",
    title="MICHAEL HANEKE",
    subtitle="The Surgeon",
    tiers=[
        create_tier(1, "LEVEL 1: THRILLERS", [
            create_film("Funny Games", 1997, "Haneke"),
            create_film("Cache", 2005, "Haneke"),
        ]),
        create_tier(2, "LEVEL 2: MASTERPIECES", [
            create_film("Amour", 2012, "Haneke"),
            create_film("The White Ribbon", 2009, "Haneke"),
            create_film("The Piano Teacher", 2001, "Haneke"),
        ]),
        create_tier(3, "LEVEL 3: GLACIATION", [
            create_film("The Seventh Continent", 1989, "Haneke"),
            create_film("Benny's Video", 1992, "Haneke"),
            create_film("71 Fragments", 1994, "Haneke"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Code Unknown", 2000, "Haneke"),
            create_film("Time of the Wolf", 2003, "Haneke"),
            create_film("Happy End", 2017, "Haneke"),
        ]),
    ],
)

ALMODOVAR = CuratedList(
    id="almodovar",
    title="PEDRO ALMODOVAR",
    subtitle="The Matador",
    tiers=[
        create_tier(1, "LEVEL 1: ENTRY", [
            create_film("Volver", 2006, "Almodovar"),
            create_film("All About My Mother", 1999, "Almodovar"),
            create_film("Women on the Verge", 1988, "Almodovar"),
        ]),
        create_tier(2, "LEVEL 2: MASTERPIECES", [
            create_film("Talk to Her", 2002, "Almodovar"),
            create_film("Pain and Glory", 2019, "Almodovar"),
            create_film("The Skin I Live In", 2011, "Almodovar"),
        ]),
        create_tier(3, "LEVEL 3: PASSION", [
            create_film("Bad Education", 2004, "Almodovar"),
            create_film("Broken Embraces", 2009, "Almodovar"),
            create_film("Live Flesh", 1997, "Almodovar"),
            create_film("Tie Me Up!", 1989, "Almodovar"),
        ]),
        create_tier(4, "LEVEL 4: EARLY", [
            create_film("Law of Desire", 1987, "Almodovar"),
            create_film("Matador", 1986, "Almodovar"),
            create_film("What Have I Done?", 1984, "Almodovar"),
        ]),
        create_tier(5, "LEVEL 5: LATE", [
            create_film("Parallel Mothers", 2021, "Almodovar"),
            create_film("Julieta", 2016, "Almodovar"),
            create_film("Strange Way of Life", 2023, "Almodovar"),
        ]),
    ],
)

VON_TRIER = CuratedList(
    id="vontrier",
    title="LARS VON TRIER",
    subtitle="The Provocateur",
    tiers=[
        create_tier(1, "LEVEL 1: MASTERPIECES", [
            create_film("Dogville", 2003, "Von Trier"),
            create_film("Melancholia", 2011, "Von Trier"),
            create_film("Breaking the Waves", 1996, "Von Trier"),
        ]),
        create_tier(2, "LEVEL 2: DEPRESSION", [
            create_film("Antichrist", 2009, "Von Trier"),
            create_film("Nymphomaniac I", 2013, "Von Trier"),
            create_film("Nymphomaniac II", 2013, "Von Trier"),
        ]),
        create_tier(3, "LEVEL 3: DOGME", [
            create_film("The Idiots", 1998, "Von Trier"),
            create_film("The Five Obstructions", 2003, "Von Trier"),
            create_film("The Boss of It All", 2006, "Von Trier"),
        ]),
        create_tier(4, "LEVEL 4: EUROPA", [
            create_film("The Element of Crime", 1984, "Von Trier"),
            create_film("Epidemic", 1987, "Von Trier"),
            create_film("Europa", 1991, "Von Trier"),
        ]),
        create_tier(5, "LEVEL 5: DEEP DIVE", [
            create_film("The House That Jack Built", 2018, "Von Trier"),
            create_film("Manderlay", 2005, "Von Trier"),
        ]),
    ],
)

FRITZ_LANG = CuratedList(
    id="lang",
    title="FRITZ LANG",
    subtitle="The Mastermind",
    tiers=[
        create_tier(1, "LEVEL 1: ICONS", [
            create_film("Metropolis", 1927, "Lang"),
            create_film("M", 1931, "Lang"),
        ]),
        create_tier(2, "LEVEL 2: NOIR", [
            create_film("The Big Heat", 1953, "Lang"),
            create_film("Fury", 1936, "Lang"),
            create_film("Scarlet Street", 1945, "Lang"),
        ]),
        create_tier(3, "LEVEL 3: MABUSE", [
            create_film("Dr. Mabuse the Gambler", 1922, "Lang"),
            create_film("The Testament of Dr. Mabuse", 1933, "Lang"),
            create_film("The Thousand Eyes of Dr. Mabuse", 1960, "Lang"),
        ]),
        create_tier(4, "LEVEL 4: EPICS", [
            create_film("Die Nibelungen: Siegfried", 1924, "Lang"),
            create_film("Destiny", 1921, "Lang"),
            create_film("Woman in the Moon", 1929, "Lang"),
        ]),
    ],
)

VARDA = CuratedList(
    id="varda",
    title="AGNES VARDA",
    subtitle="The Gleaner",
    tiers=[
        create_tier(1, "LEVEL 1: ESSENTIAL", [
            create_film("Cleo from 5 to 7", 1962, "Varda"),
            create_film("Vagabond", 1985, "Varda"),
        ]),
        create_tier(2, "LEVEL 2: DOCU-POETRY", [
            create_film("The Gleaners and I", 2000, "Varda"),
            create_film("Faces Places", 2017, "Varda"),
            create_film("The Beaches of Agnes", 2008, "Varda"),
        ]),
        create_tier(3, "LEVEL 3: COLOR", [
            create_film("Le Bonheur", 1965, "Varda"),
            create_film("One Sings, the Other Doesn't", 1977, "Varda"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("La Pointe Courte", 1955, "Varda"),
            create_film("Kung-Fu Master!", 1988, "Varda"),
        ]),
    ],
)

OZU = CuratedList(
    id="ozu",
    title="YASUJIRO OZU",
    subtitle="The Minimalist",
    tiers=[
        create_tier(1, "LEVEL 1: ICONS", [
            create_film("Tokyo Story", 1953, "Ozu"),
            create_film("Late Spring", 1949, "Ozu"),
        ]),
        create_tier(2, "LEVEL 2: COLOR", [
            create_film("Good Morning", 1959, "Ozu"),
            create_film("Floating Weeds", 1959, "Ozu"),
            create_film("An Autumn Afternoon", 1962, "Ozu"),
        ]),
        create_tier(3, "LEVEL 3: SEASONS", [
            create_film("Early Summer", 1951, "Ozu"),
            create_film("Late Autumn", 1960, "Ozu"),
            create_film("Tokyo Twilight", 1957, "Ozu"),
        ]),
        create_tier(4, "LEVEL 4: SILENT", [
            create_film("I Was Born, But...", 1932, "Ozu"),
            create_film("A Story of Floating Weeds", 1934, "Ozu"),
        ]),
    ],
)

BONG = CuratedList(
    id="bong",
    title="BONG JOON-HO",
    subtitle="The Genre Bender",
    tiers=[
        create_tier(1, "LEVEL 1: PHENOM", [
            create_film("Parasite", 2019, "Bong"),
            create_film("The Host", 2006, "Bong"),
        ]),
        create_tier(2, "LEVEL 2: CRIME", [
            create_film("Memories of Murder", 2003, "Bong"),
            create_film("Mother", 2009, "Bong"),
        ]),
        create_tier(3, "LEVEL 3: SCI-FI", [
            create_film("Snowpiercer", 2013, "Bong"),
            create_film("Okja", 2017, "Bong"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Barking Dogs Never Bite", 2000, "Bong"),
            create_film("Mickey 17", 2025, "Bong"),
        ]),
    ],
)

VILLENEUVE = CuratedList(
    id="villeneuve",
    title="DENIS VILLENEUVE",
    subtitle="The Visionary",
    tiers=[
        create_tier(1, "LEVEL 1: SCI-FI", [
            create_film("Arrival", 2016, "Villeneuve"),
            create_film("Dune: Part One", 2021, "Villeneuve"),
            create_film("Blade Runner 2049", 2017, "Villeneuve"),
        ]),
        create_tier(2, "LEVEL 2: THRILLER", [
            create_film("Sicario", 2015, "Villeneuve"),
            create_film("Prisoners", 2013, "Villeneuve"),
        ]),
        create_tier(3, "LEVEL 3: MYSTERY", [
            create_film("Incendies", 2010, "Villeneuve"),
            create_film("Enemy", 2013, "Villeneuve"),
        ]),
        create_tier(4, "LEVEL 4: EARLY", [
            create_film("Polytechnique", 2009, "Villeneuve"),
            create_film("Maelstrom", 2000, "Villeneuve"),
        ]),
    ],
)

CARPENTER = CuratedList(
    id="carpenter",
    title="JOHN CARPENTER",
    subtitle="The Horror Master",
    tiers=[
        create_tier(1, "LEVEL 1: ICONS", [
            create_film("Halloween", 1978, "Carpenter"),
            create_film("The Thing", 1982, "Carpenter"),
            create_film("Escape from New York", 1981, "Carpenter"),
        ]),
        create_tier(2, "LEVEL 2: CULT", [
            create_film("Big Trouble in Little China", 1986, "Carpenter"),
            create_film("They Live", 1988, "Carpenter"),
            create_film("Assault on Precinct 13", 1976, "Carpenter"),
        ]),
        create_tier(3, "LEVEL 3: ATMOSPHERE", [
            create_film("The Fog", 1980, "Carpenter"),
            create_film("Christine", 1983, "Carpenter"),
            create_film("Prince of Darkness", 1987, "Carpenter"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("In the Mouth of Madness", 1994, "Carpenter"),
            create_film("Starman", 1984, "Carpenter"),
            create_film("Dark Star", 1974, "Carpenter"),
        ]),
    ],
)

LEONE = CuratedList(
    id="leone",
    title="SERGIO LEONE",
    subtitle="The Gunslinger",
    tiers=[
        create_tier(1, "LEVEL 1: SPAGHETTI", [
            create_film("The Good, the Bad and the Ugly", 1966, "Leone"),
            create_film("For a Few Dollars More", 1965, "Leone"),
            create_film("A Fistful of Dollars", 1964, "Leone"),
        ]),
        create_tier(2, "LEVEL 2: MASTERPIECES", [
            create_film("Once Upon a Time in the West", 1968, "Leone"),
            create_film("Once Upon a Time in America", 1984, "Leone"),
        ]),
        create_tier(3, "LEVEL 3: REVOLUTION", [
            create_film("Duck, You Sucker!", 1971, "Leone"),
        ]),
        create_tier(4, "LEVEL 4: PEPLUM", [
            create_film("The Colossus of Rhodes", 1961, "Leone"),
        ]),
    ],
)

WILDER = CuratedList(
    id="wilder",
    title="BILLY WILDER",
    subtitle="The Writer",
    tiers=[
        create_tier(1, "LEVEL 1: COMEDY", [
            create_film("Some Like It Hot", 1959, "Wilder"),
            create_film("The Apartment", 1960, "Wilder"),
            create_film("Sunset Boulevard", 1950, "Wilder"),
        ]),
        create_tier(2, "LEVEL 2: SUSPENSE", [
            create_film("Double Indemnity", 1944, "Wilder"),
            create_film("Witness for the Prosecution", 1957, "Wilder"),
            create_film("Ace in the Hole", 1951, "Wilder"),
        ]),
        create_tier(3, "LEVEL 3: ROMANCE", [
            create_film("Sabrina", 1954, "Wilder"),
            create_film("The Seven Year Itch", 1955, "Wilder"),
            create_film("The Lost Weekend", 1945, "Wilder"),
            create_film("Stalag 17", 1953, "Wilder"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Irma la Douce", 1963, "Wilder"),
            create_film("One, Two, Three", 1961, "Wilder"),
            create_film("Avanti!", 1972, "Wilder"),
        ]),
    ],
)

CUARON = CuratedList(
    id="cuaron",
    title="ALFONSO CUARON",
    subtitle="The Alchemist",
    tiers=[
        create_tier(1, "LEVEL 1: GLOBAL", [
            create_film("Children of Men", 2006, "Cuaron"),
            create_film("Gravity", 2013, "Cuaron"),
            create_film("Harry Potter and the Prisoner of Azkaban", 2004, "Cuaron"),
        ]),
        create_tier(2, "LEVEL 2: PERSONAL", [
            create_film("Roma", 2018, "Cuaron"),
            create_film("Y Tu Mama Tambien", 2001, "Cuaron"),
        ]),
        create_tier(3, "LEVEL 3: EARLY", [
            create_film("A Little Princess", 1995, "Cuaron"),
            create_film("Great Expectations", 1998, "Cuaron"),
            create_film("Solo con tu pareja", 1991, "Cuaron"),
        ]),
    ],
)

MIYAZAKI = CuratedList(
    id="miyazaki",
    title="HAYAO MIYAZAKI",
    subtitle="The Dreamer",
    tiers=[
        create_tier(1, "LEVEL 1: WHIMSY", [
            create_film("My Neighbor Totoro", 1988, "Miyazaki"),
            create_film("Kiki's Delivery Service", 1989, "Miyazaki"),
            create_film("Ponyo", 2008, "Miyazaki"),
        ]),
        create_tier(2, "LEVEL 2: EPICS", [
            create_film("Spirited Away", 2001, "Miyazaki"),
            create_film("Princess Mononoke", 1997, "Miyazaki"),
            create_film("Howl's Moving Castle", 2004, "Miyazaki"),
        ]),
        create_tier(3, "LEVEL 3: FLIGHT", [
            create_film("Porco Rosso", 1992, "Miyazaki"),
            create_film("Castle in the Sky", 1986, "Miyazaki"),
            create_film("The Wind Rises", 2013, "Miyazaki"),
        ]),
        create_tier(4, "LEVEL 4: ORIGINS", [
            create_film("Nausicaa", 1984, "Miyazaki"),
            create_film("Castle of Cagliostro", 1979, "Miyazaki"),
            create_film("The Boy and the Heron", 2023, "Miyazaki"),
        ]),
    ],
)

WONG_KAR_WAI = CuratedList(
    id="wkw",
    title="WONG KAR-WAI",
    subtitle="Neon & Melancholy",
    tiers=[
        create_tier(1, "LEVEL 1: NEON", [
            create_film("Chungking Express", 1994, "Wong Kar-wai"),
            create_film("Fallen Angels", 1995, "Wong Kar-wai"),
        ]),
        create_tier(2, "LEVEL 2: LOVE", [
            create_film("In the Mood for Love", 2000, "Wong Kar-wai"),
            create_film("Happy Together", 1997, "Wong Kar-wai"),
        ]),
        create_tier(3, "LEVEL 3: TIME", [
            create_film("2046", 2004, "Wong Kar-wai"),
            create_film("Days of Being Wild", 1990, "Wong Kar-wai"),
            create_film("As Tears Go By", 1988, "Wong Kar-wai"),
        ]),
        create_tier(4, "LEVEL 4: STYLE", [
            create_film("The Grandmaster", 2013, "Wong Kar-wai"),
            create_film("Ashes of Time Redux", 2008, "Wong Kar-wai"),
            create_film("My Blueberry Nights", 2007, "Wong Kar-wai"),
        ]),
    ],
)

TARKOVSKY = CuratedList(
    id="tarkovsky",
    title="ANDREI TARKOVSKY",
    subtitle="Sculpting in Time",
    tiers=[
        create_tier(1, "LEVEL 1: ENTRY", [
            create_film("Ivan's Childhood", 1962, "Tarkovsky"),
        ]),
        create_tier(2, "LEVEL 2: POETRY", [
            create_film("Solaris", 1972, "Tarkovsky"),
            create_film("Stalker", 1979, "Tarkovsky"),
            create_film("Andrei Rublev", 1966, "Tarkovsky"),
        ]),
        create_tier(3, "LEVEL 3: SPIRIT", [
            create_film("Mirror", 1975, "Tarkovsky"),
            create_film("Nostalghia", 1983, "Tarkovsky"),
        ]),
        create_tier(4, "LEVEL 4: FAREWELL", [
            create_film("The Sacrifice", 1986, "Tarkovsky"),
            create_film("Steamroller and Violin", 1961, "Tarkovsky"),
        ]),
    ],
)

SATOSHI_KON = CuratedList(
    id="kon",
    title="SATOSHI KON",
    subtitle="Dream Weaver",
    tiers=[
        create_tier(1, "LEVEL 1: HOOK", [
            create_film("Perfect Blue", 1997, "Satoshi Kon"),
            create_film("Tokyo Godfathers", 2003, "Satoshi Kon"),
        ]),
        create_tier(2, "LEVEL 2: MASTERPIECE", [
            create_film("Paprika", 2006, "Satoshi Kon"),
            create_film("Millennium Actress", 2001, "Satoshi Kon"),
        ]),
        create_tier(3, "LEVEL 3: SERIES", [
            create_film("Paranoia Agent", 2004, "Satoshi Kon"),
        ]),
    ],
)

COEN_BROTHERS = CuratedList(
    id="coen",
    title="COEN BROTHERS",
    subtitle="Crime & Comedy",
    tiers=[
        create_tier(1, "LEVEL 1: FUN", [
            create_film("O Brother, Where Art Thou?", 2000, "Coen Brothers"),
            create_film("Burn After Reading", 2008, "Coen Brothers"),
            create_film("Raising Arizona", 1987, "Coen Brothers"),
        ]),
        create_tier(2, "LEVEL 2: GRIT", [
            create_film("Fargo", 1996, "Coen Brothers"),
            create_film("No Country for Old Men", 2007, "Coen Brothers"),
            create_film("The Big Lebowski", 1998, "Coen Brothers"),
            create_film("True Grit", 2010, "Coen Brothers"),
        ]),
        create_tier(3, "LEVEL 3: CRAFT", [
            create_film("Barton Fink", 1991, "Coen Brothers"),
            create_film("Inside Llewyn Davis", 2013, "Coen Brothers"),
            create_film("A Serious Man", 2009, "Coen Brothers"),
            create_film("The Man Who Wasn't There", 2001, "Coen Brothers"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Blood Simple", 1984, "Coen Brothers"),
            create_film("Miller's Crossing", 1990, "Coen Brothers"),
            create_film("Ballad of Buster Scruggs", 2018, "Coen Brothers"),
            create_film("Hail, Caesar!", 2016, "Coen Brothers"),
        ]),
    ],
)

FRENCH_WAVE = CuratedList(
    id="french",
    title="FRENCH NEW WAVE",
    subtitle="Nouvelle Vague",
    tiers=[
        create_tier(1, "LEVEL 1: ICONS", [
            create_film("The 400 Blows", 1959, "Truffaut"),
            create_film("Breathless", 1960, "Godard"),
            create_film("Cleo from 5 to 7", 1962, "Varda"),
            create_film("Jules and Jim", 1962, "Truffaut"),
        ]),
        create_tier(2, "LEVEL 2: REVOLUTION", [
            create_film("Hiroshima Mon Amour", 1959, "Resnais"),
            create_film("Band of Outsiders", 1964, "Godard"),
            create_film("Contempt", 1963, "Godard"),
            create_film("Elevator to the Gallows", 1958, "Malle"),
        ]),
        create_tier(3, "LEVEL 3: INTELLECT", [
            create_film("My Night at Maud's", 1969, "Rohmer"),
            create_film("Last Year at Marienbad", 1961, "Resnais"),
            create_film("Pierrot le Fou", 1965, "Godard"),
            create_film("Lola", 1961, "Demy"),
        ]),
        create_tier(4, "LEVEL 4: RADICAL", [
            create_film("Weekend", 1967, "Godard"),
            create_film("La Chinoise", 1967, "Godard"),
            create_film("Vivre Sa Vie", 1962, "Godard"),
        ]),
        create_tier(5, "LEVEL 5: DEEP DIVE", [
            create_film("Shoot the Piano Player", 1960, "Truffaut"),
            create_film("Paris Belongs to Us", 1961, "Rivette"),
            create_film("Le Bonheur", 1965, "Varda"),
            create_film("Celine and Julie Go Boating", 1974, "Rivette"),
            create_film("The Mother and the Whore", 1973, "Eustache"),
        ]),
    ],
)

KOREAN_WAVE = CuratedList(
    id="korean",
    title="KOREAN WAVE",
    subtitle="Hallyu",
    tiers=[
        create_tier(1, "LEVEL 1: GLOBAL HITS", [
            create_film("Parasite", 2019, "Bong"),
            create_film("Train to Busan", 2016, "Yeon"),
            create_film("The Host", 2006, "Bong"),
            create_film("Squid Game", 2021, "Series"),
        ]),
        create_tier(2, "LEVEL 2: VENGEANCE", [
            create_film("Oldboy", 2003, "Park"),
            create_film("I Saw the Devil", 2010, "Kim"),
            create_film("The Handmaiden", 2016, "Park"),
            create_film("The Chaser", 2008, "Na"),
        ]),
        create_tier(3, "LEVEL 3: CRIME & DRAMA", [
            create_film("Memories of Murder", 2003, "Bong"),
            create_film("The Wailing", 2016, "Na"),
            create_film("Mother", 2009, "Bong"),
            create_film("New World", 2013, "Park"),
            create_film("A Bittersweet Life", 2005, "Kim"),
        ]),
        create_tier(4, "LEVEL 4: ARTHOUSE", [
            create_film("Burning", 2018, "Lee"),
            create_film("Spring, Summer...", 2003, "Kim"),
            create_film("Thirst", 2009, "Park"),
            create_film("Right Now, Wrong Then", 2015, "Hong"),
        ]),
        create_tier(5, "LEVEL 5: DEEP DIVE", [
            create_film("Oasis", 2002, "Lee"),
            create_film("Sympathy for Mr. Vengeance", 2002, "Park"),
            create_film("Lady Vengeance", 2005, "Park"),
            create_film("The Good, the Bad, the Weird", 2008, "Kim"),
            create_film("3-Iron", 2004, "Kim"),
        ]),
    ],
)

ITALIAN_NEO = CuratedList(
    id="italian",
    title="ITALIAN NEOREALISM",
    subtitle="Spirit of the Streets",
    tiers=[
        create_tier(1, "LEVEL 1: ESSENTIALS", [
            create_film("Bicycle Thieves", 1948, "De Sica"),
            create_film("Rome, Open City", 1945, "Rossellini"),
            create_film("Life is Beautiful", 1997, "Benigni"),
        ]),
        create_tier(2, "LEVEL 2: THE CORE", [
            create_film("Umberto D.", 1952, "De Sica"),
            create_film("La Strada", 1954, "Fellini"),
            create_film("Rocco and His Brothers", 1960, "Visconti"),
            create_film("Paisan", 1946, "Rossellini"),
        ]),
        create_tier(3, "LEVEL 3: EVOLUTION", [
            create_film("La Terra Trema", 1948, "Visconti"),
            create_film("Germany Year Zero", 1948, "Rossellini"),
            create_film("Bitter Rice", 1949, "De Santis"),
            create_film("Miracle in Milan", 1951, "De Sica"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Nights of Cabiria", 1957, "Fellini"),
            create_film("Mamma Roma", 1962, "Pasolini"),
            create_film("Shoeshine", 1946, "De Sica"),
            create_film("Ossessione", 1943, "Visconti"),
            create_film("Rome 11:00", 1952, "De Santis"),
        ]),
    ],
)

IRANIAN = CuratedList(
    id="iranian",
    title="IRANIAN CINEMA",
    subtitle="Poetry & Censorship",
    tiers=[
        create_tier(1, "LEVEL 1: HUMANISM", [
            create_film("Children of Heaven", 1997, "Majidi"),
            create_film("A Separation", 2011, "Farhadi"),
            create_film("The Salesman", 2016, "Farhadi"),
        ]),
        create_tier(2, "LEVEL 2: LIFE & DEATH", [
            create_film("Taste of Cherry", 1997, "Kiarostami"),
            create_film("Where is the Friend's House?", 1987, "Kiarostami"),
            create_film("About Elly", 2009, "Farhadi"),
            create_film("The Color of Paradise", 1999, "Majidi"),
        ]),
        create_tier(3, "LEVEL 3: META-CINEMA", [
            create_film("Close-Up", 1990, "Kiarostami"),
            create_film("Through the Olive Trees", 1994, "Kiarostami"),
            create_film("A Moment of Innocence", 1996, "Makhmalbaf"),
            create_film("This Is Not a Film", 2011, "Panahi"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("The House is Black", 1962, "Farrokhzad"),
            create_film("Ten", 2002, "Kiarostami"),
            create_film("A Girl Walks Home Alone at Night", 2014, "Amirpour"),
            create_film("The Apple", 1998, "Makhmalbaf"),
        ]),
    ],
)

NORDIC = CuratedList(
    id="nordic",
    title="NORDIC CINEMA",
    subtitle="Ice & Fire",
    tiers=[
        create_tier(1, "LEVEL 1: COLD HITS", [
            create_film("Another Round", 2020, "Vinterberg"),
            create_film("Let the Right One In", 2008, "Alfredson"),
            create_film("The Girl with the Dragon Tattoo", 2009, "Oplev"),
        ]),
        create_tier(2, "LEVEL 2: SOCIETY", [
            create_film("The Hunt", 2012, "Vinterberg"),
            create_film("The Square", 2017, "Ostlund"),
            create_film("Force Majeure", 2014, "Ostlund"),
            create_film("Festen", 1998, "Vinterberg"),
        ]),
        create_tier(3, "LEVEL 3: MASTERS", [
            create_film("Persona", 1966, "Bergman"),
            create_film("The Seventh Seal", 1957, "Bergman"),
            create_film("The Worst Person in the World", 2021, "Trier"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Songs from the Second Floor", 2000, "Andersson"),
            create_film("Dogville", 2003, "Von Trier"),
            create_film("Lamb", 2021, "Johannsson"),
            create_film("Headhunters", 2011, "Tyldum"),
            create_film("Pusher", 1996, "Refn"),
        ]),
    ],
)

USSR = CuratedList(
    id="ussr",
    title="USSR CINEMA",
    subtitle="The Red Lens",
    tiers=[
        create_tier(1, "LEVEL 1: THE EPIC", [
            create_film("Moscow Does Not Believe in Tears", 1980, "Menshov"),
            create_film("War and Peace", 1966, "Bondarchuk"),
            create_film("Solaris", 1972, "Tarkovsky"),
        ]),
        create_tier(2, "LEVEL 2: THE EDIT", [
            create_film("Battleship Potemkin", 1925, "Eisenstein"),
            create_film("Come and See", 1985, "Klimov"),
            create_film("The Cranes Are Flying", 1957, "Kalatozov"),
        ]),
        create_tier(3, "LEVEL 3: THE ART", [
            create_film("Stalker", 1979, "Tarkovsky"),
            create_film("The Color of Pomegranates", 1969, "Parajanov"),
            create_film("Man with a Movie Camera", 1929, "Vertov"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Viy", 1967, "Yershov"),
            create_film("Ivan the Terrible", 1944, "Eisenstein"),
            create_film("Hard to Be a God", 2013, "German"),
            create_film("Ballad of a Soldier", 1959, "Chukhray"),
        ]),
    ],
)

TURKISH = CuratedList(
    id="turkish",
    title="TURKISH CINEMA",
    subtitle="90s to Present",
    tiers=[
        create_tier(1, "LEVEL 1: THE BRIDGE", [
            create_film("Eskiya", 1996, "Turgul"),
            create_film("Her Sey Cok Guzel Olacak", 1998, "Vargi"),
            create_film("Pardon", 2005, "Ilhan"),
            create_film("Vizontele", 2001, "Erdogan"),
        ]),
        create_tier(2, "LEVEL 2: NEW REALISM", [
            create_film("Masumiyet", 1997, "Demirkubuz"),
            create_film("Gemide", 1998, "Akar"),
            create_film("Bir Zamanlar Anadolu'da", 2011, "Ceylan"),
            create_film("Tabutta Rovasata", 1996, "Akin"),
        ]),
        create_tier(3, "LEVEL 3: THE AUTEUR", [
            create_film("Uzak", 2002, "Ceylan"),
            create_film("Kis Uykusu", 2014, "Ceylan"),
            create_film("Kader", 2006, "Demirkubuz"),
            create_film("Vavien", 2009, "Taylan"),
            create_film("Ahlat Agaci", 2018, "Ceylan"),
        ]),
        create_tier(4, "LEVEL 4: NEW VOICES", [
            create_film("Sarmasik", 2015, "Karacelik"),
            create_film("Kurak Gunler", 2022, "Alper"),
            create_film("Kelebekler", 2018, "Karacelik"),
            create_film("Kiz Kardesler", 2019, "Alper"),
        ]),
        create_tier(5, "LEVEL 5: DEEP DIVE", [
            create_film("Yazgi", 2001, "Demirkubuz"),
            create_film("Kosmos", 2010, "Erdem"),
            create_film("Sivas", 2014, "Mujdeci"),
            create_film("Anayurt Oteli", 1987, "Kavur"),
            create_film("Sevmek Zamani", 1965, "Erksan"),
        ]),
    ],
)

STAR_TREK = CuratedList(
    id="startrek",
    title="STAR TREK",
    subtitle="The Complete Saga",
    tiers=[
        create_tier(1, "LEVEL 1: START HERE", [
            create_film("Star Trek (2009)", 2009, "Abrams"),
            create_film("Star Trek: First Contact", 1996, "Frakes"),
            create_film("Strange New Worlds", 2022, "Series"),
        ]),
        create_tier(2, "LEVEL 2: THE KHAN ARC", [
            create_film("Space Seed (TOS)", 1967, "Series"),
            create_film("The Wrath of Khan", 1982, "Meyer"),
            create_film("The Search for Spock", 1984, "Nimoy"),
            create_film("The Voyage Home", 1986, "Nimoy"),
        ]),
        create_tier(3, "LEVEL 3: THE GOLDEN ERA", [
            create_film("The Next Generation", 1987, "Series"),
            create_film("Deep Space Nine", 1993, "Series"),
            create_film("The Undiscovered Country", 1991, "Meyer"),
        ]),
        create_tier(4, "LEVEL 4: VOYAGER & BEYOND", [
            create_film("Voyager", 1995, "Series"),
            create_film("Star Trek Beyond", 2016, "Lin"),
            create_film("Lower Decks", 2020, "Series"),
        ]),
        create_tier(5, "LEVEL 5: ORIGINS", [
            create_film("The Original Series", 1966, "Series"),
            create_film("Enterprise", 2001, "Series"),
            create_film("The Motion Picture", 1979, "Wise"),
        ]),
        create_tier(6, "LEVEL 6: COMPLETIONIST", [
            create_film("Picard", 2020, "Series"),
            create_film("Discovery", 2017, "Series"),
            create_film("Insurrection", 1998, "Frakes"),
            create_film("Nemesis", 2002, "Baird"),
            create_film("Star Trek V", 1989, "Shatner"),
            create_film("Generations", 1994, "Carson"),
        ]),
    ],
)

STAR_WARS = CuratedList(
    id="starwars",
    title="STAR WARS",
    subtitle="Skywalker & Beyond",
    tiers=[
        create_tier(1, "LEVEL 1: THE HOLY TRILOGY", [
            create_film("Episode IV: A New Hope", 1977, "Lucas"),
            create_film("Episode V: Empire Strikes Back", 1980, "Kershner"),
            create_film("Episode VI: Return of the Jedi", 1983, "Marquand"),
        ]),
        create_tier(2, "LEVEL 2: MODERN ESSENTIALS", [
            create_film("The Mandalorian", 2019, "Series"),
            create_film("Rogue One", 2016, "Edwards"),
            create_film("Andor", 2022, "Series"),
            create_film("The Force Awakens", 2015, "Abrams"),
        ]),
        create_tier(3, "LEVEL 3: THE PREQUELS", [
            create_film("Episode I: Phantom Menace", 1999, "Lucas"),
            create_film("Episode II: Attack of the Clones", 2002, "Lucas"),
            create_film("Episode III: Revenge of the Sith", 2005, "Lucas"),
        ]),
        create_tier(4, "LEVEL 4: THE REBELLION", [
            create_film("The Clone Wars", 2008, "Series"),
            create_film("Rebels", 2014, "Series"),
            create_film("The Bad Batch", 2021, "Series"),
        ]),
        create_tier(5, "LEVEL 5: THE SEQUELS", [
            create_film("The Last Jedi", 2017, "Johnson"),
            create_film("Rise of Skywalker", 2019, "Abrams"),
            create_film("Ahsoka", 2023, "Series"),
        ]),
        create_tier(6, "LEVEL 6: DEEP DIVE", [
            create_film("Solo", 2018, "Howard"),
            create_film("Obi-Wan Kenobi", 2022, "Series"),
            create_film("Visions", 2021, "Series"),
            create_film("Tales of the Jedi", 2022, "Series"),
            create_film("Book of Boba Fett", 2021, "Series"),
            create_film("The Acolyte", 2024, "Series"),
        ]),
    ],
)

CYBERPUNK = CuratedList(
    id="cyberpunk",
    title="CYBERPUNK & NEO-NOIR",
    subtitle="Rain & Neon",
    tiers=[
        create_tier(1, "LEVEL 1: THE SYSTEM", [
            create_film("The Matrix", 1999, "Wachowskis"),
            create_film("Blade Runner", 1982, "Scott"),
            create_film("Minority Report", 2002, "Spielberg"),
        ]),
        create_tier(2, "LEVEL 2: THE RAIN", [
            create_film("Blade Runner 2049", 2017, "Villeneuve"),
            create_film("Ghost in the Shell", 1995, "Oshii"),
            create_film("Akira", 1988, "Otomo"),
            create_film("Gattaca", 1997, "Niccol"),
        ]),
        create_tier(3, "LEVEL 3: THE GRIT", [
            create_film("Dark City", 1998, "Proyas"),
            create_film("RoboCop", 1987, "Verhoeven"),
            create_film("Strange Days", 1995, "Bigelow"),
            create_film("Total Recall", 1990, "Verhoeven"),
        ]),
        create_tier(4, "LEVEL 4: MODERN TECH", [
            create_film("Her", 2013, "Jonze"),
            create_film("Ex Machina", 2014, "Garland"),
            create_film("Upgrade", 2018, "Whannell"),
            create_film("Alita: Battle Angel", 2019, "Rodriguez"),
            create_film("Source Code", 2011, "Jones"),
        ]),
        create_tier(5, "LEVEL 5: DEEP DIVE", [
            create_film("Johnny Mnemonic", 1995, "Longo"),
            create_film("Existenz", 1999, "Cronenberg"),
            create_film("Renaissance", 2006, "Volckman"),
            create_film("Alphaville", 1965, "Godard"),
            create_film("Videodrome", 1983, "Cronenberg"),
            create_film("Mute", 2018, "Jones"),
        ]),
    ],
)

BODY_HORROR = CuratedList(
    id="body",
    title="BODY HORROR",
    subtitle="Flesh & Metal",
    tiers=[
        create_tier(1, "LEVEL 1: TRANSFORMATION", [
            create_film("The Fly", 1986, "Cronenberg"),
            create_film("District 9", 2009, "Blomkamp"),
            create_film("The Thing", 1982, "Carpenter"),
            create_film("Alien", 1979, "Scott"),
        ]),
        create_tier(2, "LEVEL 2: CRONENBERG CORE", [
            create_film("Videodrome", 1983, "Cronenberg"),
            create_film("Scanners", 1981, "Cronenberg"),
            create_film("The Brood", 1979, "Cronenberg"),
            create_film("Crash", 1996, "Cronenberg"),
        ]),
        create_tier(3, "LEVEL 3: MODERN EXTREMES", [
            create_film("Titane", 2021, "Ducournau"),
            create_film("Raw", 2016, "Ducournau"),
            create_film("The Substance", 2024, "Fargeat"),
            create_film("Possessor", 2020, "Cronenberg"),
            create_film("Infinity Pool", 2023, "Cronenberg"),
        ]),
        create_tier(4, "LEVEL 4: JAPAN & CULT", [
            create_film("Tetsuo", 1989, "Tsukamoto"),
            create_film("Eraserhead", 1977, "Lynch"),
            create_film("Society", 1989, "Yuzna"),
            create_film("Tokyo Gore Police", 2008, "Nishimura"),
            create_film("Slither", 2006, "Gunn"),
            create_film("Tusk", 2014, "Smith"),
        ]),
    ],
)

SPACE_OPERA = CuratedList(
    id="space_opera",
    title="SPACE OPERAS",
    subtitle="Beyond Franchises",
    tiers=[
        create_tier(1, "LEVEL 1: ADVENTURE", [
            create_film("Guardians of Galaxy", 2014, "Gunn"),
            create_film("The Fifth Element", 1997, "Besson"),
            create_film("Avatar", 2009, "Cameron"),
        ]),
        create_tier(2, "LEVEL 2: WORLD BUILDING", [
            create_film("Dune: Part One", 2021, "Villeneuve"),
            create_film("Dune: Part Two", 2024, "Villeneuve"),
            create_film("Serenity", 2005, "Whedon"),
        ]),
        create_tier(3, "LEVEL 3: CULT CLASSICS", [
            create_film("District 9", 2009, "Blomkamp"),
            create_film("Valerian", 2017, "Besson"),
            create_film("Jupiter Ascending", 2015, "Wachowskis"),
            create_film("Starship Troopers", 1997, "Verhoeven"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Legend of Galactic Heroes", 1988, "Series"),
            create_film("Prospect", 2018, "Caldwell"),
            create_film("High Life", 2018, "Denis"),
            create_film("Flash Gordon", 1980, "Hodges"),
        ]),
    ],
)

MIND_BENDERS = CuratedList(
    id="mind",
    title="MIND BENDERS",
    subtitle="Puzzle Movies",
    tiers=[
        create_tier(1, "LEVEL 1: THE QUESTION", [
            create_film("Inception", 2010, "Nolan"),
            create_film("The Truman Show", 1998, "Weir"),
            create_film("The Sixth Sense", 1999, "Shyamalan"),
            create_film("Fight Club", 1999, "Fincher"),
        ]),
        create_tier(2, "LEVEL 2: THE LOOP", [
            create_film("Eternal Sunshine", 2004, "Gondry"),
            create_film("Arrival", 2016, "Villeneuve"),
            create_film("Memento", 2000, "Nolan"),
            create_film("Donnie Darko", 2001, "Kelly"),
            create_film("12 Monkeys", 1995, "Gilliam"),
        ]),
        create_tier(3, "LEVEL 3: THE MAZE", [
            create_film("Mulholland Drive", 2001, "Lynch"),
            create_film("Synecdoche, New York", 2008, "Kaufman"),
            create_film("Enemy", 2013, "Villeneuve"),
            create_film("Being John Malkovich", 1999, "Jonze"),
            create_film("Mother!", 2017, "Aronofsky"),
        ]),
        create_tier(4, "LEVEL 4: THE IMPOSSIBLE", [
            create_film("Primer", 2004, "Carruth"),
            create_film("Coherence", 2013, "Byrkit"),
            create_film("Upstream Color", 2013, "Carruth"),
            create_film("Predestination", 2014, "Spierig"),
            create_film("Pi", 1998, "Aronofsky"),
            create_film("Tenet", 2020, "Nolan"),
        ]),
    ],
)

FOLK_HORROR = CuratedList(
    id="folk",
    title="FOLK HORROR",
    subtitle="Daylight Nightmares",
    tiers=[
        create_tier(1, "LEVEL 1: DAYLIGHT", [
            create_film("Midsommar", 2019, "Eggers"),
            create_film("The Village", 2004, "Shyamalan"),
            create_film("The Wicker Man", 1973, "Hardy"),
            create_film("Signs", 2002, "Shyamalan"),
        ]),
        create_tier(2, "LEVEL 2: GLOBAL", [
            create_film("The Wailing", 2016, "Na"),
            create_film("Onibaba", 1964, "Shindo"),
            create_film("The Witch", 2015, "Eggers"),
            create_film("Lamb", 2021, "Johannsson"),
            create_film("The Ritual", 2017, "Bruckner"),
        ]),
        create_tier(3, "LEVEL 3: CLASSICS", [
            create_film("Rosemary's Baby", 1968, "Polanski"),
            create_film("Blood on Satan's Claw", 1971, "Haggard"),
            create_film("Witchfinder General", 1968, "Reeves"),
            create_film("Kuroneko", 1968, "Shindo"),
            create_film("Viy", 1967, "Yershov"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Kill List", 2011, "Wheatley"),
            create_film("A Field in England", 2013, "Wheatley"),
            create_film("Hagazussa", 2017, "Feigelfeld"),
            create_film("November", 2017, "Sarnet"),
            create_film("You Won't Be Alone", 2022, "Stolevski"),
        ]),
    ],
)

TIME_LOOPS = CuratedList(
    id="timeloop",
    title="TIME LOOPS",
    subtitle="Deja Vu",
    tiers=[
        create_tier(1, "LEVEL 1: FUN & ACTION", [
            create_film("Groundhog Day", 1993, "Ramis"),
            create_film("Edge of Tomorrow", 2014, "Liman"),
            create_film("Palm Springs", 2020, "Barbakow"),
            create_film("Happy Death Day", 2017, "Landon"),
        ]),
        create_tier(2, "LEVEL 2: THRILLER", [
            create_film("Source Code", 2011, "Jones"),
            create_film("Run Lola Run", 1998, "Tykwer"),
            create_film("Looper", 2012, "Johnson"),
            create_film("Deja Vu", 2006, "Scott"),
            create_film("The Butterfly Effect", 2004, "Bress"),
        ]),
        create_tier(3, "LEVEL 3: PARADOX", [
            create_film("Predestination", 2014, "Spierig"),
            create_film("Triangle", 2009, "Smith"),
            create_film("Coherence", 2013, "Byrkit"),
            create_film("Tenet", 2020, "Nolan"),
        ]),
        create_tier(4, "LEVEL 4: ART & INDIE", [
            create_film("La Jetee", 1962, "Marker"),
            create_film("Primer", 2004, "Carruth"),
            create_film("The Endless", 2017, "Benson"),
            create_film("Resolution", 2012, "Benson"),
            create_film("ARQ", 2016, "Elliott"),
            create_film("Mirage", 2018, "Paulo"),
            create_film("About Time", 2013, "Curtis"),
        ]),
    ],
)

TRACKS = CuratedList(
    id="tracks",
    title="TRACKS & TENSION",
    subtitle="Trains",
    tiers=[
        create_tier(1, "LEVEL 1: SPEED", [
            create_film("Snowpiercer", 2013, "Bong"),
            create_film("Train to Busan", 2016, "Yeon"),
            create_film("Bullet Train", 2022, "Leitch"),
            create_film("Unstoppable", 2010, "Scott"),
            create_film("Source Code", 2011, "Jones"),
        ]),
        create_tier(2, "LEVEL 2: MYSTERY", [
            create_film("Murder on Orient Express", 1974, "Lumet"),
            create_film("The Lady Vanishes", 1938, "Hitchcock"),
            create_film("Strangers on a Train", 1951, "Hitchcock"),
            create_film("Girl on the Train", 2016, "Taylor"),
            create_film("Transsiberian", 2008, "Anderson"),
        ]),
        create_tier(3, "LEVEL 3: JOURNEY", [
            create_film("The Darjeeling Limited", 2007, "Anderson"),
            create_film("Runaway Train", 1985, "Konchalovsky"),
            create_film("Europa", 1991, "Von Trier"),
            create_film("The General", 1926, "Keaton"),
            create_film("North by Northwest", 1959, "Hitchcock"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Taking of Pelham 123", 1974, "Sargent"),
            create_film("Von Ryan's Express", 1965, "Robson"),
            create_film("Emperor of the North", 1973, "Aldrich"),
            create_film("Compartment No. 6", 2021, "Kuosmanen"),
            create_film("Titan A.E.", 2000, "Bluth"),
        ]),
    ],
)

DINNER = CuratedList(
    id="dinner",
    title="DINNER IS SERVED",
    subtitle="Bon Appetit",
    tiers=[
        create_tier(1, "LEVEL 1: APPETITE", [
            create_film("The Menu", 2022, "Mylod"),
            create_film("Ratatouille", 2007, "Bird"),
            create_film("Chef", 2014, "Favreau"),
            create_film("Julie & Julia", 2009, "Ephron"),
            create_film("Chocolat", 2000, "Hallstrom"),
        ]),
        create_tier(2, "LEVEL 2: STRESS", [
            create_film("The Bear", 2022, "Series"),
            create_film("Boiling Point", 2021, "Barantini"),
            create_film("Babette's Feast", 1987, "Axel"),
            create_film("Big Night", 1996, "Tucci"),
            create_film("Burnt", 2015, "Wells"),
        ]),
        create_tier(3, "LEVEL 3: GROTESQUE", [
            create_film("The Cook, the Thief...", 1989, "Greenaway"),
            create_film("The Platform", 2019, "Gaztelu-Urrutia"),
            create_film("Delicatessen", 1991, "Jeunet"),
            create_film("Hannibal", 2013, "Series"),
            create_film("Raw", 2016, "Ducournau"),
        ]),
        create_tier(4, "LEVEL 4: CULTURE", [
            create_film("Eat Drink Man Woman", 1994, "Lee"),
            create_film("Tampopo", 1985, "Itami"),
            create_film("Jiro Dreams of Sushi", 2011, "Gelb"),
            create_film("Like Water for Chocolate", 1992, "Arau"),
            create_film("The Lunchbox", 2013, "Batra"),
        ]),
    ],
)

ISOLATION = CuratedList(
    id="isolation",
    title="THE ISOLATION TANK",
    subtitle="No Way Out",
    tiers=[
        create_tier(1, "LEVEL 1: SURVIVAL", [
            create_film("Cast Away", 2000, "Zemeckis"),
            create_film("The Martian", 2015, "Scott"),
            create_film("127 Hours", 2010, "Boyle"),
            create_film("Gravity", 2013, "Cuaron"),
            create_film("Life of Pi", 2012, "Lee"),
        ]),
        create_tier(2, "LEVEL 2: CABIN FEVER", [
            create_film("The Lighthouse", 2019, "Eggers"),
            create_film("The Shining", 1980, "Kubrick"),
            create_film("Misery", 1990, "Reiner"),
            create_film("10 Cloverfield Lane", 2016, "Trachtenberg"),
            create_film("Room", 2015, "Abrahamson"),
        ]),
        create_tier(3, "LEVEL 3: EXISTENTIAL", [
            create_film("Moon", 2009, "Jones"),
            create_film("Woman in the Dunes", 1964, "Teshigahara"),
            create_film("Exterminating Angel", 1962, "Bunuel"),
            create_film("High Life", 2018, "Denis"),
            create_film("Silent Running", 1972, "Trumbull"),
        ]),
        create_tier(4, "LEVEL 4: CONFINED", [
            create_film("Buried", 2010, "Cortes"),
            create_film("Locke", 2013, "Knight"),
            create_film("Cube", 1997, "Natali"),
            create_film("Safe", 1995, "Haynes"),
            create_film("Rear Window", 1954, "Hitchcock"),
            create_film("The Terminal", 2004, "Spielberg"),
        ]),
    ],
)

HEIST = CuratedList(
    id="heist",
    title="ART HEIST",
    subtitle="Stealing Beauty",
    tiers=[
        create_tier(1, "LEVEL 1: STYLE", [
            create_film("Ocean's Eleven", 2001, "Soderbergh"),
            create_film("The Thomas Crown Affair", 1999, "McTiernan"),
            create_film("Lupin", 2021, "Series"),
            create_film("The Italian Job", 2003, "Gray"),
            create_film("Now You See Me", 2013, "Leterrier"),
        ]),
        create_tier(2, "LEVEL 2: TECHNIQUE", [
            create_film("Rififi", 1955, "Dassin"),
            create_film("Inside Man", 2006, "Lee"),
            create_film("Entrapment", 1999, "Amiel"),
            create_film("Snatch", 2000, "Ritchie"),
            create_film("Logan Lucky", 2017, "Soderbergh"),
        ]),
        create_tier(3, "LEVEL 3: SATIRE", [
            create_film("The Square", 2017, "Ostlund"),
            create_film("Exit Through Gift Shop", 2010, "Banksy"),
            create_film("F for Fake", 1973, "Welles"),
            create_film("The Best Offer", 2013, "Tornatore"),
            create_film("Velvet Buzzsaw", 2019, "Gilroy"),
        ]),
        create_tier(4, "LEVEL 4: REALITY", [
            create_film("American Animals", 2018, "Layton"),
            create_film("Trance", 2013, "Boyle"),
            create_film("The Duke", 2020, "Michell"),
            create_film("Gambit", 1966, "Neame"),
            create_film("Museum Hours", 2012, "Cohen"),
        ]),
    ],
)

SUBURBAN = CuratedList(
    id="suburban",
    title="SUBURBAN NIGHTMARES",
    subtitle="Picket Fences",
    tiers=[
        create_tier(1, "LEVEL 1: FACADE", [
            create_film("The Truman Show", 1998, "Weir"),
            create_film("Edward Scissorhands", 1990, "Burton"),
            create_film("Don't Worry Darling", 2022, "Wilde"),
            create_film("Desperate Housewives", 2004, "Series"),
            create_film("Stepford Wives", 1975, "Forbes"),
        ]),
        create_tier(2, "LEVEL 2: ROT", [
            create_film("Blue Velvet", 1986, "Lynch"),
            create_film("American Beauty", 1999, "Mendes"),
            create_film("Virgin Suicides", 1999, "Coppola"),
            create_film("Revolutionary Road", 2008, "Mendes"),
            create_film("Little Children", 2006, "Field"),
        ]),
        create_tier(3, "LEVEL 3: WEIRD", [
            create_film("Dogtooth", 2009, "Lanthimos"),
            create_film("Vivarium", 2019, "Finnegan"),
            create_film("Pleasantville", 1998, "Ross"),
            create_film("The Burbs", 1989, "Dante"),
            create_film("Poltergeist", 1982, "Hooper"),
        ]),
        create_tier(4, "LEVEL 4: DARK", [
            create_film("Serial Mom", 1994, "Waters"),
            create_film("Happiness", 1998, "Solondz"),
            create_film("Parasite", 2019, "Bong"),
            create_film("Us", 2019, "Peele"),
            create_film("Fright Night", 1985, "Holland"),
        ]),
    ],
)

FOURTH_WALL = CuratedList(
    id="fourth",
    title="BREAKING 4TH WALL",
    subtitle="Meta Narratives",
    tiers=[
        create_tier(1, "LEVEL 1: FUN", [
            create_film("Ferris Bueller", 1986, "Hughes"),
            create_film("Deadpool", 2016, "Miller"),
            create_film("The Big Short", 2015, "McKay"),
            create_film("Wayne's World", 1992, "Spheeris"),
        ]),
        create_tier(2, "LEVEL 2: SMART", [
            create_film("Annie Hall", 1977, "Allen"),
            create_film("Fleabag", 2016, "Series"),
            create_film("High Fidelity", 2000, "Frears"),
            create_film("Amelie", 2001, "Jeunet"),
        ]),
        create_tier(3, "LEVEL 3: DARK", [
            create_film("Funny Games", 1997, "Haneke"),
            create_film("Man Bites Dog", 1992, "Belvaux"),
            create_film("Fight Club", 1999, "Fincher"),
            create_film("Lord of War", 2005, "Niccol"),
        ]),
        create_tier(4, "LEVEL 4: ART", [
            create_film("Holy Motors", 2012, "Carax"),
            create_film("Adaptation", 2002, "Jonze"),
            create_film("8 1/2", 1963, "Fellini"),
            create_film("Rubber", 2010, "Dupieux"),
            create_film("Symbiopsychotaxiplasm", 1968, "Greaves"),
        ]),
    ],
)

MACHINE = CuratedList(
    id="machine",
    title="MAN VS MACHINE",
    subtitle="Singularity",
    tiers=[
        create_tier(1, "LEVEL 1: ACTION", [
            create_film("The Terminator", 1984, "Cameron"),
            create_film("I, Robot", 2004, "Proyas"),
            create_film("The Matrix", 1999, "Wachowskis"),
            create_film("Avengers: Age of Ultron", 2015, "Whedon"),
            create_film("M3GAN", 2022, "Johnstone"),
        ]),
        create_tier(2, "LEVEL 2: SENTIENCE", [
            create_film("Ex Machina", 2014, "Garland"),
            create_film("Her", 2013, "Jonze"),
            create_film("Blade Runner", 1982, "Scott"),
            create_film("Big Hero 6", 2014, "Hall"),
            create_film("Robot & Frank", 2012, "Schreier"),
        ]),
        create_tier(3, "LEVEL 3: PHILOSOPHY", [
            create_film("2001: A Space Odyssey", 1968, "Kubrick"),
            create_film("Ghost in the Shell", 1995, "Oshii"),
            create_film("A.I.", 2001, "Spielberg"),
            create_film("Westworld", 2016, "Series"),
            create_film("Bicentennial Man", 1999, "Columbus"),
        ]),
        create_tier(4, "LEVEL 4: ORIGIN", [
            create_film("Metropolis", 1927, "Lang"),
            create_film("Colossus", 1970, "Sargent"),
            create_film("World on a Wire", 1973, "Fassbinder"),
            create_film("After Yang", 2021, "Kogonada"),
            create_film("Brian and Charles", 2022, "Archer"),
        ]),
    ],
)

WILD_NIGHT = CuratedList(
    id="wild",
    title="ONE WILD NIGHT",
    subtitle="Before Sunrise",
    tiers=[
        create_tier(1, "LEVEL 1: CHAOS", [
            create_film("The Hangover", 2009, "Phillips"),
            create_film("Superbad", 2007, "Mottola"),
            create_film("Die Hard", 1988, "McTiernan"),
            create_film("Project X", 2012, "Nourizadeh"),
        ]),
        create_tier(2, "LEVEL 2: FLOW", [
            create_film("After Hours", 1985, "Scorsese"),
            create_film("Victoria", 2015, "Schipper"),
            create_film("Before Sunrise", 1995, "Linklater"),
            create_film("Dazed and Confused", 1993, "Linklater"),
        ]),
        create_tier(3, "LEVEL 3: DRAMA", [
            create_film("La Notte", 1961, "Antonioni"),
            create_film("Cleo from 5 to 7", 1962, "Varda"),
            create_film("Locke", 2013, "Knight"),
            create_film("Oslo, August 31st", 2011, "Trier"),
        ]),
        create_tier(4, "LEVEL 4: INDIE", [
            create_film("Tangerine", 2015, "Baker"),
            create_film("Good Time", 2017, "Safdie"),
            create_film("Mikey and Nicky", 1976, "May"),
            create_film("Who's Afraid of Virginia Woolf?", 1966, "Nichols"),
        ]),
    ],
)

SWASHBUCKLING = CuratedList(
    id="adventure",
    title="SWASHBUCKLING",
    subtitle="Sword & Adventure",
    tiers=[
        create_tier(1, "LEVEL 1: FUN", [
            create_film("Pirates of the Caribbean", 2003, "Verbinski"),
            create_film("The Mask of Zorro", 1998, "Campbell"),
            create_film("The Mummy", 1999, "Sommers"),
        ]),
        create_tier(2, "LEVEL 2: CLASSIC", [
            create_film("The Princess Bride", 1987, "Reiner"),
            create_film("Crouching Tiger, Hidden Dragon", 2000, "Lee"),
            create_film("The Three Musketeers", 1973, "Lester"),
        ]),
        create_tier(3, "LEVEL 3: GOLDEN AGE", [
            create_film("Adventures of Robin Hood", 1938, "Curtiz"),
            create_film("Captain Blood", 1935, "Curtiz"),
            create_film("The Duellists", 1977, "Scott"),
            create_film("The Mark of Zorro", 1940, "Mamoulian"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("Master and Commander", 2003, "Weir"),
            create_film("Cutthroat Island", 1995, "Harlin"),
            create_film("Scaramouche", 1952, "Sidney"),
            create_film("Black Sails", 2014, "Series"),
        ]),
    ],
)

MAFIA = CuratedList(
    id="mafia",
    title="MAFIA & MOB",
    subtitle="The Family Business",
    tiers=[
        create_tier(1, "LEVEL 1: RISE", [
            create_film("The Untouchables", 1987, "De Palma"),
            create_film("Scarface", 1983, "De Palma"),
            create_film("Donnie Brasco", 1997, "Newell"),
            create_film("The Departed", 2006, "Scorsese"),
        ]),
        create_tier(2, "LEVEL 2: FAMILY", [
            create_film("The Godfather", 1972, "Coppola"),
            create_film("The Godfather II", 1974, "Coppola"),
            create_film("Goodfellas", 1990, "Scorsese"),
            create_film("Casino", 1995, "Scorsese"),
        ]),
        create_tier(3, "LEVEL 3: SAGA", [
            create_film("Once Upon a Time in America", 1984, "Leone"),
            create_film("The Irishman", 2019, "Scorsese"),
            create_film("Heat", 1995, "Mann"),
            create_film("Carlito's Way", 1993, "De Palma"),
        ]),
        create_tier(4, "LEVEL 4: DEEP", [
            create_film("Gomorrah", 2008, "Garrone"),
            create_film("City of God", 2002, "Meirelles"),
            create_film("Eastern Promises", 2007, "Cronenberg"),
            create_film("Miller's Crossing", 1990, "Coens"),
            create_film("Road to Perdition", 2002, "Mendes"),
            create_film("The Sopranos", 1999, "Series"),
        ]),
    ],
)

STOP_MOTION = CuratedList(
    id="stopmotion",
    title="STOP MOTION",
    subtitle="Handmade Magic",
    tiers=[
        create_tier(1, "LEVEL 1: POPULAR", [
            create_film("The Nightmare Before Christmas", 1993, "Selick"),
            create_film("Chicken Run", 2000, "Park"),
            create_film("Corpse Bride", 2005, "Burton"),
            create_film("Wallace & Gromit", 2005, "Park"),
        ]),
        create_tier(2, "LEVEL 2: ARTISTRY", [
            create_film("Coraline", 2009, "Selick"),
            create_film("Fantastic Mr. Fox", 2009, "Anderson"),
            create_film("Kubo and the Two Strings", 2016, "Knight"),
            create_film("ParaNorman", 2012, "Fell"),
        ]),
        create_tier(3, "LEVEL 3: MATURE", [
            create_film("Mary and Max", 2009, "Elliot"),
            create_film("Isle of Dogs", 2018, "Anderson"),
            create_film("Anomalisa", 2015, "Kaufman"),
        ]),
        create_tier(4, "LEVEL 4: SURREAL", [
            create_film("Alice", 1988, "Svankmajer"),
            create_film("Mad God", 2021, "Tippett"),
            create_film("The House", 2022, "Series"),
            create_film("The Wolf House", 2018, "Cociña"),
        ]),
    ],
)

ROMCOMS = CuratedList(
    id="romcoms",
    title="90s ROM-COMS",
    subtitle="The Golden Era",
    tiers=[
        create_tier(1, "LEVEL 1: ICONIC", [
            create_film("Pretty Woman", 1990, "Marshall"),
            create_film("10 Things I Hate About You", 1999, "Junger"),
            create_film("Clueless", 1995, "Heckerling"),
            create_film("There's Something About Mary", 1998, "Farrelly"),
        ]),
        create_tier(2, "LEVEL 2: STANDARD", [
            create_film("Notting Hill", 1999, "Michell"),
            create_film("When Harry Met Sally", 1989, "Reiner"),
            create_film("Sleepless in Seattle", 1993, "Ephron"),
            create_film("You've Got Mail", 1998, "Ephron"),
        ]),
        create_tier(3, "LEVEL 3: TWIST", [
            create_film("My Best Friend's Wedding", 1997, "Hogan"),
            create_film("Four Weddings and a Funeral", 1994, "Newell"),
            create_film("Jerry Maguire", 1996, "Crowe"),
            create_film("As Good as It Gets", 1997, "Brooks"),
        ]),
        create_tier(4, "LEVEL 4: DEEP DIVE", [
            create_film("While You Were Sleeping", 1995, "Turteltaub"),
            create_film("Reality Bites", 1994, "Stiller"),
            create_film("Chasing Amy", 1997, "Smith"),
            create_film("Singles", 1992, "Crowe"),
        ]),
    ],
)

SLOW_CINEMA = CuratedList(
    id="slow",
    title="SLOW CINEMA",
    subtitle="The Art of Time",
    tiers=[
        create_tier(1, "LEVEL 1: PAUSE", [
            create_film("Nomadland", 2020, "Zhao"),
            create_film("Paterson", 2016, "Jarmusch"),
            create_film("Gerry", 2002, "Van Sant"),
            create_film("Perfect Days", 2023, "Wenders"),
        ]),
        create_tier(2, "LEVEL 2: SILENCE", [
            create_film("Columbus", 2017, "Kogonada"),
            create_film("Taste of Cherry", 1997, "Kiarostami"),
            create_film("Yi Yi", 2000, "Yang"),
            create_film("Once Upon a Time in Anatolia", 2011, "Ceylan"),
        ]),
        create_tier(3, "LEVEL 3: DURATION", [
            create_film("Jeanne Dielman", 1975, "Akerman"),
            create_film("Elephant", 2003, "Van Sant"),
            create_film("Tropical Malady", 2004, "Weerasethakul"),
            create_film("Uncle Boonmee", 2010, "Weerasethakul"),
        ]),
        create_tier(4, "LEVEL 4: ETERNITY", [
            create_film("Satantango", 1994, "Tarr"),
            create_film("Stalker", 1979, "Tarkovsky"),
            create_film("Goodbye, Dragon Inn", 2003, "Tsai"),
            create_film("A Ghost Story", 2017, "Lowery"),
            create_film("Sleep Has Her House", 2017, "Barley"),
        ]),
    ],
)

FEMALE_GAZE = CuratedList(
    id="female",
    title="THE FEMALE GAZE",
    subtitle="A Different Perspective",
    tiers=[
        create_tier(1, "LEVEL 1: CONNECTION", [
            create_film("Lost in Translation", 2003, "Coppola"),
            create_film("Lady Bird", 2017, "Gerwig"),
            create_film("Little Women", 2019, "Gerwig"),
            create_film("Booksmart", 2019, "Wilde"),
        ]),
        create_tier(2, "LEVEL 2: DESIRE", [
            create_film("The Piano", 1993, "Campion"),
            create_film("Portrait of a Lady on Fire", 2019, "Sciamma"),
            create_film("Cleo from 5 to 7", 1962, "Varda"),
            create_film("Fish Tank", 2009, "Arnold"),
        ]),
        create_tier(3, "LEVEL 3: BODY & FORM", [
            create_film("Beau Travail", 1999, "Denis"),
            create_film("Titane", 2021, "Ducournau"),
            create_film("The Power of the Dog", 2021, "Campion"),
            create_film("Raw", 2016, "Ducournau"),
        ]),
        create_tier(4, "LEVEL 4: EXPERIMENTAL", [
            create_film("Daisies", 1966, "Chytilova"),
            create_film("The Souvenir", 2019, "Hogg"),
            create_film("Meshes of the Afternoon", 1943, "Deren"),
            create_film("Jeanne Dielman", 1975, "Akerman"),
            create_film("Wanda", 1970, "Loden"),
        ]),
    ],
)

GATEWAY_ANIME = CuratedList(
    id="anime_gateway",
    title="GATEWAY ANIME",
    subtitle="Start Here",
    tiers=[
        create_tier(1, "LEVEL 1: SHONEN", [
            create_film("My Hero Academia", 2016, "Series"),
            create_film("One Punch Man", 2015, "Series"),
            create_film("Mob Psycho 100", 2016, "Series"),
            create_film("Demon Slayer", 2019, "Series"),
        ]),
        create_tier(2, "LEVEL 2: THRILLER", [
            create_film("Death Note", 2006, "Series"),
            create_film("Ergo Proxy", 2006, "Series"),
            create_film("Psycho-Pass", 2012, "Series"),
            create_film("Steins;Gate", 2011, "Series"),
        ]),
        create_tier(3, "LEVEL 3: THE ABYSS", [
            create_film("Made in Abyss", 2017, "Series"),
            create_film("Serial Experiments Lain", 1998, "Series"),
            create_film("Neon Genesis Evangelion", 1995, "Series"),
            create_film("Attack on Titan", 2013, "Series"),
        ]),
        create_tier(4, "LEVEL 4: CLASSICS", [
            create_film("Cowboy Bebop", 1998, "Series"),
            create_film("Fullmetal Alchemist: Brotherhood", 2009, "Series"),
            create_film("Samurai Champloo", 2004, "Series"),
            create_film("Trigun", 1998, "Series"),
        ]),
    ],
)


ARCHIVE_CATEGORIES: tuple[ListCategory, ...] = (
    ListCategory(
        title="THE GRANDMASTERS",
        lists=[
            KUBRICK, TARANTINO, HITCHCOCK, SCORSESE, SPIELBERG, KUROSAWA,
            LYNCH, PT_ANDERSON, FINCHER, WES_ANDERSON, NOLAN, RIDLEY_SCOTT,
            BERGMAN, FELLINI, HANEKE, ALMODOVAR, VON_TRIER, FRITZ_LANG, VARDA,
            OZU, BONG, VILLENEUVE, CARPENTER, LEONE, WILDER, CUARON, MIYAZAKI,
            WONG_KAR_WAI, TARKOVSKY, SATOSHI_KON, COEN_BROTHERS,
        ],
    ),
    ListCategory(
        title="GENRES & UNIVERSES",
        lists=[
            STAR_TREK, STAR_WARS, SPACE_OPERA, CYBERPUNK, BODY_HORROR,
            MIND_BENDERS, FOLK_HORROR, TIME_LOOPS, SWASHBUCKLING, MAFIA,
            STOP_MOTION, ROMCOMS, SLOW_CINEMA, FEMALE_GAZE, GATEWAY_ANIME,
        ],
    ),
    ListCategory(
        title="MOVEMENTS & WORLD",
        lists=[
            FRENCH_WAVE, KOREAN_WAVE, ITALIAN_NEO, IRANIAN, NORDIC, USSR,
            TURKISH,
        ],
    ),
    ListCategory(
        title="THEMATIC",
        lists=[
            TRACKS, DINNER, ISOLATION, HEIST, SUBURBAN, FOURTH_WALL, MACHINE,
            WILD_NIGHT,
        ],
    ),
)


BADGE_TITLES: dict[str, str] = {
    "kubrick": "THE MONOLITH",
    "tarantino": "THE BRIDE",
    "kurosawa": "THE SEVEN",
    "hitchcock": "THE VOYEUR",
    "scorsese": "THE WISEGUY",
    "spielberg": "THE E.T.",
    "startrek": "FLEET ADMIRAL",
    "starwars": "JEDI MASTER",
    "bergman": "KNIGHT",
    "lynch": "DREAMER",
    "fincher": "ARCHITECT",
    "nolan": "TIME LORD",
    "ridley": "REPLICANT",
    "french": "OUTSIDER",
    "korean": "AVENGER",
    "cyberpunk": "BLADE RUNNER",
    "body": "NEW FLESH",
    "pta": "MAGNOLIA",
    "wes": "DOLLHOUSE",
    "fellini": "8 1/2",
    "haneke": "FUNNY MAN",
    "almodovar": "MATADOR",
    "vontrier": "ANTICHRIST",
    "lang": "M",
    "varda": "CLEO",
    "ozu": "TOKYO",
    "bong": "HOST",
    "villeneuve": "DUNE",
    "carpenter": "SHAPE",
    "leone": "BLONDIE",
    "wilder": "HOT",
    "cuaron": "GRAVITY",
    "miyazaki": "SPIRITED",
    "wkw": "ROMANTIC",
    "tarkovsky": "POET",
    "kon": "DREAMER",
    "coen": "DUDE",
    "tracks": "CONDUCTOR",
    "dinner": "CHEF",
    "isolation": "SURVIVOR",
    "heist": "MASTERMIND",
    "suburban": "NEIGHBOR",
    "fourth": "NARRATOR",
    "machine": "CYBORG",
    "wild": "PARTY ANIMAL",
    "anime_gateway": "OTAKU",
    "female": "THE GAZE",
    "slow": "OBSERVER",
    "romcoms": "HEARTTHROB",
    "stopmotion": "PUPPET MASTER",
    "mafia": "DON",
    "adventure": "PIRATE",
    "timeloop": "TIME LORD",
    "folk": "MAY QUEEN",
    "mind": "ARCHITECT",
}


class CatalogStore:
    """Read-only access to the canonical category/list/tier/film tree."""

    def __init__(self, categories: Iterable[ListCategory] = ARCHIVE_CATEGORIES):
        self._categories = tuple(categories)
        self._lists: dict[str, CuratedList] = {}
        for category in self._categories:
            for curated in category.lists:
                self._lists.setdefault(curated.id, curated)

    @property
    def categories(self) -> tuple[ListCategory, ...]:
        return tuple(category.model_copy(deep=True) for category in self._categories)

    def __contains__(self, list_id: object) -> bool:
        return list_id in self._lists

    def __iter__(self) -> Iterator[CuratedList]:
        for list_id in self._lists:
            yield self._lists[list_id].model_copy(deep=True)

    def list_ids(self) -> tuple[str, ...]:
        return tuple(self._lists)

    def get(self, list_id: str) -> CuratedList | None:
        """Return a private copy of the canonical list, if shipped."""

        curated = self._lists.get(list_id)
        if curated is None:
            return None
        return curated.model_copy(deep=True)

    def all_films(self) -> list[Film]:
        """Return every distinct catalog film, first occurrence wins."""

        films: dict[str, Film] = {}
        for curated in self._lists.values():
            for film in curated.all_films():
                films.setdefault(film.id, film)
        return [film.model_copy() for film in films.values()]

    def find_film(self, film_id: str) -> Film | None:
        for curated in self._lists.values():
            for film in curated.all_films():
                if film.id == film_id:
                    return film.model_copy()
        return None

    def lists_containing_film(self, film_id: str) -> list[dict[str, str]]:
        """Return id/title pairs of canonical lists containing the film."""

        return [
            {"id": curated.id, "title": curated.title}
            for curated in self._lists.values()
            if curated.contains_film(film_id)
        ]

    def search_films(self, query: str) -> list[Film]:
        """Return catalog films whose title contains the query."""

        needle = query.strip().casefold()
        if not needle:
            return []
        return [film for film in self.all_films() if needle in film.title.casefold()]
