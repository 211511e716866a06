"""Static destination catalog: hand-authored templates scored against every request.

Catalog order matters:
- Ties in score keep catalog order
- Even-indexed entries carry a +60/night price bump
- The first two entries are the no-match fallback
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BookingOptionTemplate:
    """Supplier offer without a price; priced per request."""
    type: str          # "hotel" | "tour" | "experience" | "transport"
    name: str
    description: str
    booking_url: str


@dataclass(frozen=True)
class DayTemplate:
    """One itinerary day without a day number; cycled for longer trips."""
    title: str
    description: str


@dataclass(frozen=True)
class DestinationTemplate:
    destination: str
    country: str
    summary: str
    highlights: tuple[str, ...]
    ideal_for: tuple[str, ...]
    climates: tuple[str, ...]
    budget: str
    activities: tuple[str, ...]
    booking_options: tuple[BookingOptionTemplate, ...]
    sample_itinerary: tuple[DayTemplate, ...]
    travel_tips: tuple[str, ...]
    recommended_season: str
    local_cuisine: tuple[str, ...]
    tags: tuple[str, ...]

    @property
    def key(self) -> tuple[str, str]:
        return (self.destination, self.country)


DESTINATION_CATALOG: tuple[DestinationTemplate, ...] = (
    DestinationTemplate(
        destination="Kyoto",
        country="Japan",
        summary=(
            "A tranquil blend of ancient temples, tea houses, and vibrant local culture "
            "surrounded by mountains and lush gardens."
        ),
        highlights=(
            "Sunrise meditation at ancient temples",
            "Private tea ceremony in Gion",
            "Arashiyama bamboo forest walk",
        ),
        ideal_for=("couple", "solo", "family"),
        climates=("temperate",),
        budget="midrange",
        activities=("culture", "history", "food", "nature", "wellness", "photography"),
        booking_options=(
            BookingOptionTemplate(
                type="hotel",
                name="Hoshinoya Kyoto",
                description="Riverside ryokan with private boat transfer and kaiseki.",
                booking_url="https://hoshinoyakyoto.com",
            ),
            BookingOptionTemplate(
                type="experience",
                name="Private Tea Ceremony",
                description="Guided by a tea master in Gion with kimono fitting option.",
                booking_url="https://teaceremonykyoto.com",
            ),
            BookingOptionTemplate(
                type="tour",
                name="Arashiyama Day Tour",
                description="Tailored guide through bamboo grove and hidden temples.",
                booking_url="https://kyotoprivateguide.jp",
            ),
        ),
        sample_itinerary=(
            DayTemplate(
                title="Historic Northern Kyoto",
                description="Kinkaku-ji, Ryoan-ji rock garden, and Kaiseki dinner in Pontocho.",
            ),
            DayTemplate(
                title="Arashiyama Serenity",
                description="Bamboo grove at dawn, river boat ride, Tenryu-ji temple gardens.",
            ),
            DayTemplate(
                title="Gion Cultural Immersion",
                description="Tea ceremony, traditional crafts workshop, evening geisha district stroll.",
            ),
        ),
        travel_tips=(
            "Reserve popular restaurants and tea ceremonies 4-6 weeks ahead.",
            "Purchase the Kyoto City Bus & Subway pass for easy transport.",
            "Pack layers; evenings can be cool even in spring and autumn.",
        ),
        recommended_season="March-May and October-November for mild weather and foliage.",
        local_cuisine=("kaiseki", "yudofu", "matcha sweets", "obanzai"),
        tags=("zen", "gardens", "spiritual", "culinary"),
    ),
    DestinationTemplate(
        destination="Lisbon & Sintra",
        country="Portugal",
        summary=(
            "Sun-soaked coastal capital with vibrant neighborhoods partnered with "
            "fairy-tale palaces in nearby Sintra."
        ),
        highlights=(
            "Fado music evening in Alfama",
            "Sunset sail on the Tagus River",
            "Peña Palace and Quinta da Regaleira exploration",
        ),
        ideal_for=("friends", "couple", "solo", "family"),
        climates=("coastal", "temperate"),
        budget="budget",
        activities=("food", "nightlife", "history", "architecture", "outdoors"),
        booking_options=(
            BookingOptionTemplate(
                type="hotel",
                name="The Lumiares Hotel & Spa",
                description="Boutique apartments in Bairro Alto with rooftop views and spa access.",
                booking_url="https://thelumiares.com",
            ),
            BookingOptionTemplate(
                type="experience",
                name="Sunset Sailing Cruise",
                description="Small-group sail with local wine and narration of Lisbon’s maritime history.",
                booking_url="https://lisbonsailing.com",
            ),
            BookingOptionTemplate(
                type="tour",
                name="Sintra by Locals",
                description="Day trip with skip-the-line palace access and gourmet picnic in the forests.",
                booking_url="https://sintralocals.pt",
            ),
        ),
        sample_itinerary=(
            DayTemplate(
                title="Lisbon Neighborhoods",
                description="Tram 28 ride, Time Out Market tasting session, and Alfama sunset viewpoints.",
            ),
            DayTemplate(
                title="Sintra and Cascais",
                description=(
                    "Explore Pena Palace, Moorish Castle, and relax on Guincho Beach "
                    "before seafood dinner."
                ),
            ),
            DayTemplate(
                title="Gastronomy & Culture",
                description="Pastel de nata workshop, LX Factory creatives tour, Fado dinner club.",
            ),
        ),
        travel_tips=(
            "Use Viva Viagem card for public transport; recharge as needed.",
            "Wear comfortable shoes—Lisbon’s hills feature plenty of cobblestones.",
            "Sintra mornings are cooler; bring a light jacket.",
        ),
        recommended_season="April-June or September for warm weather without peak crowds.",
        local_cuisine=("pastel de nata", "bacalhau", "sardines", "ginjinha"),
        tags=("sunset", "culture", "budget-friendly", "music"),
    ),
    DestinationTemplate(
        destination="Queenstown",
        country="New Zealand",
        summary=(
            "Adventure capital framed by alpine lakes—perfect for adrenaline seekers "
            "and scenic escapes alike."
        ),
        highlights=(
            "Helicopter glacier landing",
            "Milford Sound cruise",
            "Central Otago wine tasting",
        ),
        ideal_for=("friends", "group", "couple", "family"),
        climates=("mountainous", "temperate"),
        budget="luxury",
        activities=("adventure", "hiking", "water", "wine", "scenery"),
        booking_options=(
            BookingOptionTemplate(
                type="hotel",
                name="Matakauri Lodge",
                description=(
                    "Luxury lakefront suites with spa, private decks, and curated "
                    "adventure concierge."
                ),
                booking_url="https://matakaurilodge.com",
            ),
            BookingOptionTemplate(
                type="experience",
                name="Milford Sound Scenic Flight + Cruise",
                description="Fly-cruise-fly itinerary over Fiordland with naturalist commentary.",
                booking_url="https://milfordsoundflights.co.nz",
            ),
            BookingOptionTemplate(
                type="tour",
                name="Central Otago Wine Trail",
                description="Private guide through boutique vineyards with gourmet lunch pairing.",
                booking_url="https://queenstownwinetrail.co.nz",
            ),
        ),
        sample_itinerary=(
            DayTemplate(
                title="Lake Wakatipu Adventure",
                description=(
                    "Jet boating, Skyline gondola, and farm-to-table dining overlooking "
                    "the Remarkables."
                ),
            ),
            DayTemplate(
                title="Fiordland Expedition",
                description="Scenic flight to Milford Sound, catamaran cruise, and guided rainforest walk.",
            ),
            DayTemplate(
                title="Wine & Wellness",
                description="Spa morning, private wine tastings, sunset cruise with local chef tasting menu.",
            ),
        ),
        travel_tips=(
            "Layer clothing—weather shifts quickly in alpine climates.",
            "Book adventure activities at least 2 weeks out in peak season.",
            "Consider renting a car for winery visits; left-side driving applies.",
        ),
        recommended_season="November-April for warmer weather; June-August for skiing.",
        local_cuisine=("lamb", "green-lipped mussels", "pinot noir", "pavlova"),
        tags=("adventure", "luxury", "wine", "nature"),
    ),
    DestinationTemplate(
        destination="Tulum",
        country="Mexico",
        summary=(
            "Bohemian Caribbean escape featuring eco-chic stays, Mayan ruins, and "
            "cenote adventures."
        ),
        highlights=(
            "Guided sunrise visit to Tulum ruins",
            "Swimming in Gran Cenote",
            "Chef-led jungle dining experience",
        ),
        ideal_for=("couple", "friends", "group"),
        climates=("tropical", "coastal"),
        budget="midrange",
        activities=("beach", "wellness", "food", "culture", "nightlife", "diving"),
        booking_options=(
            BookingOptionTemplate(
                type="hotel",
                name="La Valise Tulum",
                description=(
                    "Eco-conscious boutique hotel with beach beds and personalized "
                    "wellness programs."
                ),
                booking_url="https://lavalisetulum.com",
            ),
            BookingOptionTemplate(
                type="experience",
                name="Cenote Exploration",
                description="Private guide through lesser-known cenotes with underwater photography.",
                booking_url="https://tulumcenotes.com",
            ),
            BookingOptionTemplate(
                type="tour",
                name="Sian Ka’an Biosphere Safari",
                description="Protected reserve boat tour spotting dolphins, turtles, and manatees.",
                booking_url="https://siankaancommunitytours.com",
            ),
        ),
        sample_itinerary=(
            DayTemplate(
                title="Beach & Wellness",
                description="Sunrise yoga, beach club afternoon, sunset sound bath with local healer.",
            ),
            DayTemplate(
                title="Cenotes & Culture",
                description="Gran Cenote swim, Mayan workshop, jungle dinner at Hartwood.",
            ),
            DayTemplate(
                title="Biosphere Adventure",
                description="Sian Ka’an boating, snorkeling on coral reef, nightlife in downtown Tulum.",
            ),
        ),
        travel_tips=(
            "Pack biodegradable sunscreen; standard sunscreen is banned in cenotes.",
            "Carry pesos for taxis and small vendors; ATMs can be limited.",
            "Reserve popular restaurants a week before arrival.",
        ),
        recommended_season="November-April for dry season; avoid September/October storms.",
        local_cuisine=("cochinita pibil", "ceviche", "aguachile", "mezcal cocktails"),
        tags=("wellness", "beach", "eco", "gastronomy"),
    ),
    DestinationTemplate(
        destination="Reykjavík & South Coast",
        country="Iceland",
        summary=(
            "Nordic capital with geothermal spas and dramatic landscapes including "
            "waterfalls, glaciers, and black-sand beaches."
        ),
        highlights=(
            "Blue Lagoon retreat experience",
            "Northern Lights super-jeep hunt",
            "Glacier hike on Sólheimajökull",
        ),
        ideal_for=("friends", "family", "group", "solo"),
        climates=("cold", "coastal"),
        budget="luxury",
        activities=("nature", "adventure", "photography", "wellness", "wildlife"),
        booking_options=(
            BookingOptionTemplate(
                type="hotel",
                name="The Reykjavik EDITION",
                description="Design-forward stay with private geothermal experiences and harbor views.",
                booking_url="https://editionhotels.com/reykjavik",
            ),
            BookingOptionTemplate(
                type="tour",
                name="South Coast Super Jeep",
                description=(
                    "Private expedition to waterfalls, ice beach, and glacier walk with "
                    "safety gear."
                ),
                booking_url="https://icelandluxurytours.is",
            ),
            BookingOptionTemplate(
                type="experience",
                name="Northern Lights Retreat",
                description="Aurora viewing with astrophotographer and hot gourmet beverages.",
                booking_url="https://northernlights.is",
            ),
        ),
        sample_itinerary=(
            DayTemplate(
                title="City & Culinary",
                description=(
                    "Reykjavík city walk, Icelandic lamb tasting, evening geothermal "
                    "spa relaxation."
                ),
            ),
            DayTemplate(
                title="South Coast Wonders",
                description=(
                    "Seljalandsfoss waterfall, black sand beaches, glacier hike with "
                    "expert guide."
                ),
            ),
            DayTemplate(
                title="Arctic Adventure",
                description=(
                    "Golden Circle highlights, snowmobiling on Langjökull, aurora chase "
                    "at night."
                ),
            ),
        ),
        travel_tips=(
            "Weather changes rapidly; pack thermal layers and waterproof outerwear.",
            "Book Blue Lagoon and premium restaurants well in advance.",
            "Driving conditions can be challenging in winter—consider private transfers.",
        ),
        recommended_season=(
            "February-April for aurora and snowy landscapes; June-August for midnight sun."
        ),
        local_cuisine=("Icelandic lamb", "skyr", "langoustine", "rye bread"),
        tags=("northern lights", "geothermal", "photography", "adventure"),
    ),
    DestinationTemplate(
        destination="Cape Town & Winelands",
        country="South Africa",
        summary=(
            "Iconic Table Mountain views, vibrant neighborhoods, and world-class "
            "vineyards within a short drive."
        ),
        highlights=(
            "Table Mountain sunrise hike",
            "Private safari at Aquila Game Reserve",
            "Franschhoek wine tram exploration",
        ),
        ideal_for=("friends", "couple", "family", "group"),
        climates=("coastal", "temperate"),
        budget="midrange",
        activities=("wildlife", "wine", "food", "hiking", "culture"),
        booking_options=(
            BookingOptionTemplate(
                type="hotel",
                name="One&Only Cape Town",
                description="Waterfront resort with Table Mountain views and Nobu restaurant on-site.",
                booking_url="https://oneandonlyresorts.com/cape-town",
            ),
            BookingOptionTemplate(
                type="tour",
                name="Cape Peninsula Adventure",
                description="Private guide for penguin colony, Cape Point, and Chapman’s Peak drive.",
                booking_url="https://capetownprivatetours.co.za",
            ),
            BookingOptionTemplate(
                type="experience",
                name="Franschhoek Wine Tram",
                description=(
                    "Open-air tram through storied vineyards with cellar tastings and "
                    "gourmet lunch."
                ),
                booking_url="https://winetram.co.za",
            ),
        ),
        sample_itinerary=(
            DayTemplate(
                title="City & Coast",
                description="Table Mountain cableway, V&A Waterfront, sunset at Camps Bay.",
            ),
            DayTemplate(
                title="Winelands Discovery",
                description=(
                    "Franschhoek tram, Stellenbosch pairings, evening fine-dining "
                    "chef’s table."
                ),
            ),
            DayTemplate(
                title="Wildlife & Culture",
                description="Cape Peninsula drive, penguin colony visit, township arts tour.",
            ),
        ),
        travel_tips=(
            "Uber works well in the city; arrange private drivers for the Winelands.",
            "Secure safari and Cape Peninsula guides 3-4 weeks in advance.",
            "Spring (Sept-Nov) offers wildflowers; summer brings warm beach days.",
        ),
        recommended_season="September-November or March-May for mild weather.",
        local_cuisine=("braai", "bobotie", "cape malay curry", "chenin blanc"),
        tags=("safari", "wine", "culinary", "scenic"),
    ),
    DestinationTemplate(
        destination="Dubrovnik & Dalmatian Coast",
        country="Croatia",
        summary=(
            "Walled seaside city with Adriatic views, island hopping, and "
            "Mediterranean cuisine."
        ),
        highlights=(
            "Old Town private walking tour",
            "Elaphiti Islands yacht day",
            "Pelješac Peninsula wine tasting",
        ),
        ideal_for=("couple", "friends", "family"),
        climates=("coastal", "temperate"),
        budget="midrange",
        activities=("history", "sailing", "food", "wine", "relaxation"),
        booking_options=(
            BookingOptionTemplate(
                type="hotel",
                name="Hotel Excelsior Dubrovnik",
                description=(
                    "Seaside hotel steps from the Old Town with spa and private beach "
                    "platform."
                ),
                booking_url="https://excelsior-dubrovnik.com",
            ),
            BookingOptionTemplate(
                type="tour",
                name="Old Town Cultural Stroll",
                description=(
                    "Historian-led walk covering Game of Thrones filming spots and "
                    "hidden monasteries."
                ),
                booking_url="https://dubrovnikwalks.com",
            ),
            BookingOptionTemplate(
                type="experience",
                name="Elaphiti Yacht Charter",
                description=(
                    "Skippered yacht visiting Lopud, Sipan, and secluded coves with "
                    "onboard lunch."
                ),
                booking_url="https://adriaticyacht.com",
            ),
        ),
        sample_itinerary=(
            DayTemplate(
                title="Walled City & Gastronomy",
                description="City walls walk, seafood lunch, sunset cocktails at Buža bar.",
            ),
            DayTemplate(
                title="Island Yachting",
                description=(
                    "Full-day yacht charter, kayaking in hidden coves, cliffside dinner "
                    "back in town."
                ),
            ),
            DayTemplate(
                title="Wine & Countryside",
                description="Pelješac wineries, oyster farm visit, evening fortress cable car ride.",
            ),
        ),
        travel_tips=(
            "Book yacht charters early in summer; they sell out quickly.",
            "Carry comfortable sandals for Old Town’s polished stone streets.",
            "Use the Dubrovnik pass for attractions and public transport savings.",
        ),
        recommended_season="May-June or September for warm seas and fewer crowds.",
        local_cuisine=("dalmatian seafood", "black risotto", "oysters", "plavac mali wine"),
        tags=("sailing", "culinary", "romantic", "history"),
    ),
    DestinationTemplate(
        destination="Banff & Lake Louise",
        country="Canada",
        summary=(
            "Iconic Canadian Rockies road trip with turquoise lakes, glacier-fed "
            "rivers, and alpine wildlife."
        ),
        highlights=(
            "Sunrise canoe on Lake Louise",
            "Icefields Parkway guided drive",
            "Banff Upper Hot Springs soak",
        ),
        ideal_for=("family", "friends", "group", "solo"),
        climates=("mountainous", "cold"),
        budget="midrange",
        activities=("hiking", "wildlife", "photography", "wellness", "scenic drives"),
        booking_options=(
            BookingOptionTemplate(
                type="hotel",
                name="Fairmont Chateau Lake Louise",
                description=(
                    "Historic chateau with lakeside rooms, paddle rentals, and alpine "
                    "guides desk."
                ),
                booking_url="https://fairmont.com/lake-louise",
            ),
            BookingOptionTemplate(
                type="experience",
                name="Columbia Icefield Adventure",
                description="Glacier explorer vehicle trip plus glass-floored Skywalk admission.",
                booking_url="https://icefields.com",
            ),
            BookingOptionTemplate(
                type="tour",
                name="Sunrise Wildlife Safari",
                description=(
                    "Naturalist-led small group to spot elk, bears, and big horn sheep "
                    "safely."
                ),
                booking_url="https://banfftours.com",
            ),
        ),
        sample_itinerary=(
            DayTemplate(
                title="Banff & Bow Valley",
                description="Banff gondola, Johnston Canyon hike, evening at historic Banff Springs.",
            ),
            DayTemplate(
                title="Lakes & Glaciers",
                description="Lake Louise canoe, Moraine Lake photography, glacier viewpoints.",
            ),
            DayTemplate(
                title="Icefields Parkway",
                description=(
                    "Scenic drive with stops at Peyto Lake, Athabasca Glacier, and "
                    "Mistaya Canyon."
                ),
            ),
        ),
        travel_tips=(
            "Park shuttle reservations are required for Moraine Lake in peak season.",
            "Carry bear spray while hiking and know how to use it.",
            "Dress in layers; mountain weather swings widely.",
        ),
        recommended_season="June-September for open trails; December-March for skiing.",
        local_cuisine=("alberta beef", "maple treats", "craft beer", "wild game"),
        tags=("outdoors", "family-friendly", "road trip", "photography"),
    ),
)

CLIMATE_LABELS: dict[str, str] = {
    "tropical": "Tropical",
    "temperate": "Temperate",
    "cold": "Cold / Arctic",
    "arid": "Desert / Arid",
    "mountainous": "Mountainous",
    "coastal": "Coastal",
}

COMPANION_LABELS: dict[str, str] = {
    "solo": "Solo Travelers",
    "couple": "Couples",
    "family": "Families",
    "friends": "Friends",
    "group": "Groups",
}


def find_destination(
    destination: str,
    country: str,
    catalog: tuple[DestinationTemplate, ...] = DESTINATION_CATALOG,
) -> DestinationTemplate | None:
    """Look up a template by its (destination, country) key."""
    for template in catalog:
        if template.key == (destination, country):
            return template
    return None
