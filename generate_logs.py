# file: generate_logs.py
"""
Demo log generator for ircview.

Writes a directory tree of synthetic IRC channel logs in the layout the
importer expects:

    <output_dir>/<channel>/<YYYY-MM-DD>.txt

Each day file mixes spoken lines ("<#chan@net:nick> ..."), notices
("(#chan@net:nick) ..."), and system lines (joins, quits, topic changes)
that the importer drops. Messages are a mix of English and Japanese so the
bigram search can be tried on text without word boundaries. Faker is used
for nicknames and sentences.
"""

import argparse
import pathlib
import random
from datetime import date, timedelta
from faker import Faker

# --- Configuration Defaults ---
DEFAULT_OUTPUT_DIR = "logs/irc"
DEFAULT_CHANNELS = ["general", "random", "dev", "雑談"]
DEFAULT_DAYS = 7
DEFAULT_LINES_PER_DAY = 200
DEFAULT_NETWORK = "ircnet"

# --- Setup ---
fake_en = Faker()
fake_ja = Faker("ja_JP")

class ChannelSimulator:
    """Generates one channel's chatter for a day."""
    def __init__(self, channel: str, network: str, members: int = 8):
        self.channel = channel
        self.network = network
        self.nicks = [fake_en.user_name() for _ in range(members)]

    def _timestamp(self, seconds: int) -> str:
        return f"{seconds // 3600:02d}:{seconds % 3600 // 60:02d}:{seconds % 60:02d}"

    def _message(self) -> str:
        if random.random() < 0.4:
            return fake_ja.sentence()
        return fake_en.sentence()

    def generate_line(self, seconds: int) -> str:
        ts = self._timestamp(seconds)
        nick = random.choice(self.nicks)
        target = f"#{self.channel}@{self.network}:{nick}"
        kind = random.choices(["privmsg", "notice", "join", "quit", "topic"], weights=[80, 8, 6, 4, 2])[0]

        if kind == "privmsg":
            return f"{ts} <{target}> {self._message()}"
        if kind == "notice":
            return f"{ts} ({target}) {self._message()}"
        if kind == "join":
            return f"{ts} + {nick} ({nick}@{fake_en.domain_name()}) to #{self.channel}@{self.network}"
        if kind == "quit":
            return f"{ts} ! {nick} (Quit: {fake_en.word()})"
        return f"{ts} Topic of channel #{self.channel}@{self.network} by {nick}: {self._message()}"

    def generate_day(self, lines: int):
        seconds = sorted(random.sample(range(24 * 3600), lines))
        return [self.generate_line(s) for s in seconds]

def main(args):
    """Writes the synthetic log tree."""
    output_dir = pathlib.Path(args.output_dir)
    start = date.today() - timedelta(days=args.days - 1)
    total_files = 0

    print(f"Generating {args.days} days of logs for {len(args.channels)} channels into {output_dir} ...")
    for channel in args.channels:
        simulator = ChannelSimulator(channel, args.network)
        channel_dir = output_dir / channel
        channel_dir.mkdir(parents=True, exist_ok=True)
        for offset in range(args.days):
            day = start + timedelta(days=offset)
            lines = simulator.generate_day(args.lines_per_day)
            (channel_dir / f"{day.isoformat()}.txt").write_text("\n".join(lines) + "\n", encoding="utf-8")
            total_files += 1

    print(f"Completed. Wrote {total_files} log files under '{output_dir}'.")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Synthetic IRC log tree generator for ircview")
    parser.add_argument("--output_dir", type=str, default=DEFAULT_OUTPUT_DIR, help="Root directory of the log tree")
    parser.add_argument("--channels", nargs="+", default=DEFAULT_CHANNELS, help="Channel names")
    parser.add_argument("--days", type=int, default=DEFAULT_DAYS, help="Number of days per channel")
    parser.add_argument("--lines_per_day", type=int, default=DEFAULT_LINES_PER_DAY, help="Lines per day file")
    parser.add_argument("--network", type=str, default=DEFAULT_NETWORK, help="IRC network name used in speaker tags")
    args = parser.parse_args()
    main(args)
