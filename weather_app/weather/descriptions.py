from __future__ import annotations

from enum import Enum
from random import Random


class Bucket(str, Enum):
    HOT = "hot"
    MILD = "mild"
    COOL = "cool"


BASE_PHRASES: dict[Bucket, tuple[str, ...]] = {
    Bucket.HOT: ("Sunny", "Hot and dry", "Scorching sun", "Warm breeze"),
    Bucket.MILD: ("Partly cloudy", "Mild and pleasant", "Light clouds", "Calm skies"),
    Bucket.COOL: ("Cool and crisp", "Overcast", "Chilly breeze", "Cloudy"),
}
WET_PHRASES: tuple[str, ...] = ("Light rain", "Showers", "Drizzle", "Humid and cloudy")
WINDY_PHRASES: tuple[str, ...] = ("Windy", "Gusty winds", "Breezy")

HOT_THRESHOLD = 28
MILD_THRESHOLD = 16
WET_HUMIDITY = 70
WINDY_THRESHOLD = 20
WINDY_CHANCE = 0.4


def bucket_for(temperature: float) -> Bucket:
    if temperature >= HOT_THRESHOLD:
        return Bucket.HOT
    if temperature >= MILD_THRESHOLD:
        return Bucket.MILD
    return Bucket.COOL


def candidate_pool(temperature: float, humidity: float, rng: Random | None = None) -> list[str]:
    """Collect the phrases a reading with these values may be described with.

    The bucket's base phrases are always present. Wet phrases join at high
    humidity; windy phrases join on warm readings when a 40% draw succeeds.
    Order is kept and duplicates collapse.
    """

    rng = rng or Random()
    pool = dict.fromkeys(BASE_PHRASES[bucket_for(temperature)])
    if humidity >= WET_HUMIDITY:
        pool.update(dict.fromkeys(WET_PHRASES))
    if temperature >= WINDY_THRESHOLD and rng.random() < WINDY_CHANCE:
        pool.update(dict.fromkeys(WINDY_PHRASES))
    return list(pool)


def pick_description(temperature: float, humidity: float, rng: Random | None = None) -> str:
    rng = rng or Random()
    return rng.choice(candidate_pool(temperature, humidity, rng))
