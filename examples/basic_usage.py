"""Basic usage examples for the snowday client."""

from snowday import (
    Country,
    LocationResolver,
    PostalCode,
    SchoolType,
    SnowDayClient,
    WeatherFetcher,
    assess,
)


def main() -> None:
    # One call runs the whole pipeline
    with SnowDayClient() as client:
        for code, country in [("55401", Country.US), ("R3C 4A5", Country.CA)]:
            estimate = client.estimate(code, country, SchoolType.PUBLIC)
            print(f"=== {estimate.location.display_name} ({code}) ===")
            print(f"  Probability: {estimate.result.score}% ({estimate.result.risk_level.value})")
            print(f"  {estimate.result.alert}")

    # Or drive each stage yourself
    code = PostalCode.parse("05401", Country.US)
    with LocationResolver() as resolver, WeatherFetcher() as fetcher:
        location = resolver.resolve(code)
        snapshot = fetcher.fetch(location.latitude, location.longitude)

    print(f"\n=== {location.display_name} by stage ===")
    if snapshot.missing_fields:
        print(f"  Provider omitted: {', '.join(snapshot.missing_fields)}")
    for school_type in SchoolType:
        result = assess(snapshot, code.country, school_type)
        parts = result.breakdown
        print(
            f"  {school_type.value:>8}: {result.score:3d}% "
            f"(snow {parts.snow_points} + cold {parts.cold_points} + bonus {parts.bonus_points})"
        )


if __name__ == "__main__":
    main()
