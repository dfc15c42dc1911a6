#!/usr/bin/env python3
"""
Basic Race Example

This example demonstrates how to:
1. Generate a schedule for a field of cars
2. Run every heat, recording random finishing places
3. Preview the heat on deck while racing
4. Read the final standings

Run with: python run_race.py
"""

import numpy as np

from racingweb import RaceSession


def main():
    print("=" * 60)
    print("RacingWeb Basic Race Example")
    print("=" * 60)

    # Step 1: Generate a schedule
    print("\n1. Generating schedule...")
    session = RaceSession()
    schedule = session.generate_schedule(10, 4)

    print(f"   Cars: {len(session.roster)}")
    print(f"   Lanes: {schedule.lane_count}")
    print(f"   Heats: {len(schedule)}")
    for line in schedule.summary_lines():
        print(f"   {line}")

    # Step 2: Run the heats
    print("\n2. Running heats with random finishes...")
    rng = np.random.default_rng(42)

    while not session.is_finished:
        lineup = session.current_lineup
        title = session.run_title()
        preview = session.heat_preview()

        places = rng.permutation(lineup.lane_count) + 1
        for lane, place in enumerate(places):
            session.mark_place(lane, int(place))

        finish = sorted(zip(places, lineup.numbers))
        print(f"   {title}: "
              + ", ".join(f"{place}. #{number}" for place, number in finish))
        print(f"      {preview}")

        session.advance()

    # Step 3: Final standings
    print("\n3. Final standings:")
    for standing in session.standings_table():
        print(f"   {standing.position:>2}. {standing.car.label:<6} score {standing.score}")

    print("\n" + "=" * 60)
    print("Race complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
