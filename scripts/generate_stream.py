"""Generate a sample top-7 instruction stream.

Produces a reproducible contest: each round adds a few new songs with a
NEW line, then a batch of voters each vote for a handful of eligible
songs, with an occasional TOP report. Optionally writes a catalogue of
fake song titles for the generated ids, which is handy for demos.

Usage:
    python scripts/generate_stream.py -o votes.txt
    python scripts/generate_stream.py --rounds 20 --voters 50 --catalogue songs.tsv
"""

import argparse
import sys
from pathlib import Path

from faker import Faker

SEED = 20260201


def generate_stream(
    fake: Faker,
    rounds: int,
    voters: int,
    new_songs: int,
    max_ballot: int,
) -> list[str]:
    """Generate instruction lines for a whole contest.

    Songs are considered eligible from the round they are introduced in;
    songs that placed in a round and then fell out are not tracked here,
    so a few generated ballots may be rejected by the contest. That is
    intended: it exercises the error path too.
    """
    lines: list[str] = []
    bound = 0

    for round_number in range(rounds):
        bound += fake.random_int(min=1, max=new_songs)
        lines.append(f"NEW {bound}")

        for _ in range(voters):
            length = fake.random_int(min=1, max=min(max_ballot, bound))
            ballot = fake.random_sample(elements=list(range(1, bound + 1)), length=length)
            lines.append(" ".join(str(song) for song in ballot))

        if round_number % 2 == 1:
            lines.append("TOP")
        else:
            lines.append("")

    lines.append(f"NEW {bound}")
    lines.append("TOP")
    return lines


def generate_catalogue(fake: Faker, bound: int) -> dict[int, str]:
    """Map each song id up to `bound` to a fake title."""
    titles: dict[int, str] = {}
    used: set[str] = set()
    for song in range(1, bound + 1):
        title = fake.catch_phrase()
        while title in used:
            title = fake.catch_phrase()
        used.add(title)
        titles[song] = title
    return titles


def main():
    parser = argparse.ArgumentParser(
        description="Generate a sample top-7 instruction stream")
    parser.add_argument("-o", "--output", default="-",
                        help="Output path (default: stdout)")
    parser.add_argument("--rounds", type=int, default=10,
                        help="Number of rounds (default: 10)")
    parser.add_argument("--voters", type=int, default=30,
                        help="Ballots per round (default: 30)")
    parser.add_argument("--new-songs", type=int, default=5,
                        help="Maximum songs added per round (default: 5)")
    parser.add_argument("--max-ballot", type=int, default=4,
                        help="Maximum songs on one ballot (default: 4)")
    parser.add_argument("--seed", type=int, default=SEED,
                        help=f"Random seed (default: {SEED})")
    parser.add_argument("--catalogue",
                        help="Also write a tab-separated id/title catalogue here")
    args = parser.parse_args()

    fake = Faker()
    Faker.seed(args.seed)

    lines = generate_stream(fake, args.rounds, args.voters, args.new_songs, args.max_ballot)
    text = "\n".join(lines) + "\n"

    if args.output == "-":
        sys.stdout.write(text)
    else:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
        print(f"Written {len(lines)} lines to {output_path}", file=sys.stderr)

    if args.catalogue:
        bound = int(lines[-2].split()[1])
        catalogue = generate_catalogue(fake, bound)
        catalogue_path = Path(args.catalogue)
        catalogue_path.parent.mkdir(parents=True, exist_ok=True)
        catalogue_path.write_text(
            "".join(f"{song}\t{title}\n" for song, title in catalogue.items()),
            encoding="utf-8",
        )
        print(f"Written {len(catalogue)} titles to {catalogue_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
