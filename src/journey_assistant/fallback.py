from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class FallbackStrategy(Protocol):
    def reply(self, user_text: str) -> str:
        """Return a canned reply. Must not raise and must not do I/O."""
        ...


GENERIC_REPLIES: tuple[str, ...] = (
    "I can help you with that! Let me suggest some options based on your preferences. "
    "What's your ideal travel style - adventure, relaxation, cultural exploration, or a mix?",
    "Excellent choice! I can provide recommendations for accommodations, activities, "
    "and local experiences. What's most important to you for this trip?",
    "Great question! I can help you plan the perfect timing for your trip. Weather patterns, "
    "local events, and tourist seasons all play important roles in determining the ideal travel dates.",
)


class UniformFallback:
    def __init__(self, pool: tuple[str, ...] = GENERIC_REPLIES, rng: random.Random | None = None):
        if not pool:
            raise ValueError("UniformFallback needs at least one reply")
        self._pool = pool
        self._rng = rng or random.Random()

    def reply(self, user_text: str) -> str:
        return self._rng.choice(self._pool)


@dataclass(frozen=True)
class TopicBucket:
    name: str
    keywords: tuple[str, ...]
    reply: str

    def matches(self, lowered_text: str) -> bool:
        return any(keyword in lowered_text for keyword in self.keywords)


_JAPAN_REPLY = """\
Absolutely! Japan is a fantastic choice for a week-long adventure.

7-Day Japan Itinerary:
• Days 1-3: Tokyo - Shibuya Crossing, Senso-ji Temple and the Tsukiji Outer Market
• Day 4: Day trip to Nikko or Hakone for hot springs and views of Mount Fuji
• Days 5-6: Kyoto - Fushimi Inari, Arashiyama bamboo grove and Gion at dusk
• Day 7: Osaka - Dotonbori street food before flying home

Getting Around:
• A 7-day Japan Rail Pass covers the Tokyo to Kyoto shinkansen
• Load an IC card (Suica or Pasmo) for subways and convenience stores

I recommend booking Kyoto accommodation early during cherry blossom and autumn leaf seasons.

Would you like me to adjust this itinerary for your interests?"""

_BALI_REPLY = """\
Great! Bali is perfect for beaches, culture and rice-terrace walks.

Best Time to Visit:
• April to June and September to early October bring dry weather and fewer crowds
• July and August are peak season with higher prices

Where to Stay:
• Ubud for temples, yoga and jungle views
• Seminyak for beach clubs and sunsets
• Nusa Dua for quiet family-friendly resorts

Consider hiring a local driver for a day to reach waterfalls in the north of Bali.

What kind of Bali experience are you dreaming of?"""

_EUROPE_REPLY = """\
Excellent! Europe rewards travellers who plan routes around fast trains.

Classic Route Ideas:
• Paris, Amsterdam and Berlin by high-speed rail
• Rome, Florence and Venice for art and food
• Barcelona, Lisbon and Porto along the Iberian coast

Money Savers:
• Buy rail tickets early or use a Eurail pass for many short hops
• Stay in guesthouses outside the historic centres

Try visiting in May or September for mild weather across Europe.

How many weeks are you planning to spend?"""

_TRIP_PLANNING_REPLY = """\
Absolutely! Let's plan your trip together.

To build your itinerary I need a few details:
• Where would you like to go?
• How many days do you have?
• What's your approximate budget?
• Do you prefer adventure, relaxation, culture or a mix?

I suggest starting with your must-see sights and building the days around them.

Where are you thinking of heading?"""

_BUDGET_REPLY = """\
Great! Travelling well on a budget is all about timing and trade-offs.

Budget Tips:
• Travel in shoulder season for lower flight and hotel prices
• Book flights 6-8 weeks ahead and compare nearby airports
• Mix guesthouses with a few special stays
• Eat where locals eat and use public transport

Affordable Destinations:
• Vietnam, Portugal, Mexico and Thailand offer great value

What's your budget per day, roughly?"""

_ROMANTIC_REPLY = """\
Wonderful! Here are some destinations couples love.

Romantic Getaways:
• Santorini for cliffside sunsets over the caldera
• Maldives for overwater villas and quiet beaches
• Paris for cafes, river walks and candle-lit dinners
• Kyoto for temples, gardens and traditional ryokan stays

I recommend planning one surprise experience, like a sunset cruise or private dinner.

Are you celebrating something special?"""

_PACKING_REPLY = """\
Perfect! Smart packing makes every trip easier.

Essentials:
• Passport, travel insurance details and copies of bookings
• Universal adapter and a power bank
• A small first-aid kit and any prescriptions

For Winter Trips:
• Thermal base layers, a waterproof shell and warm gloves
• Waterproof boots with good grip

Try packing cubes to keep layers organised and your bag light.

Where and when are you travelling?"""

_ADVICE_REPLY = """\
Great question! Here's some advice that helps on almost every trip.

Before You Go:
• Check visa and vaccination requirements
• Tell your bank about your travel dates
• Save offline maps for your destination

While Travelling:
• Keep digital and paper copies of important documents
• Learn a few phrases in the local language

What else would you like to know?"""

_CAPABILITIES_REPLY = """\
I'm your AI travel assistant and I can help you with:

• Planning complete trip itineraries
• Choosing destinations and the best time to visit
• Budget travel tips and cost estimates
• Romantic getaways and honeymoon ideas
• Packing lists for any climate

What would you like to explore first?"""


TOPIC_BUCKETS: tuple[TopicBucket, ...] = (
    TopicBucket("japan", ("japan", "tokyo", "kyoto", "osaka"), _JAPAN_REPLY),
    TopicBucket("bali", ("bali", "ubud", "seminyak"), _BALI_REPLY),
    TopicBucket("europe", ("europe", "paris", "rome", "barcelona"), _EUROPE_REPLY),
    TopicBucket("trip_planning", ("plan", "itinerary"), _TRIP_PLANNING_REPLY),
    TopicBucket("budget", ("budget", "cheap", "afford", "cost"), _BUDGET_REPLY),
    TopicBucket("romantic", ("romantic", "couple", "honeymoon"), _ROMANTIC_REPLY),
    TopicBucket("packing", ("pack", "luggage", "bring"), _PACKING_REPLY),
    TopicBucket("general_advice", ("advice", "tip", "help", "recommend"), _ADVICE_REPLY),
)


class TopicRoutedFallback:
    """Keyword-routed canned replies.

    Buckets are checked in order and the first match wins, so destination
    buckets sit ahead of the generic planning bucket.
    """

    def __init__(
        self,
        buckets: tuple[TopicBucket, ...] = TOPIC_BUCKETS,
        default_reply: str = _CAPABILITIES_REPLY,
    ):
        self._buckets = buckets
        self._default_reply = default_reply

    def select_bucket(self, user_text: str) -> TopicBucket | None:
        lowered = user_text.lower()
        for bucket in self._buckets:
            if bucket.matches(lowered):
                return bucket
        return None

    def reply(self, user_text: str) -> str:
        bucket = self.select_bucket(user_text)
        if bucket is None:
            return self._default_reply
        return bucket.reply


def create_fallback(strategy_name: str) -> FallbackStrategy:
    """Factory: create a FallbackStrategy by name."""
    name = strategy_name.strip().lower()
    if name == "topic":
        return TopicRoutedFallback()
    if name == "uniform":
        return UniformFallback()
    raise ValueError(f"Unknown fallback strategy: {strategy_name!r}. Supported: 'topic', 'uniform'")
