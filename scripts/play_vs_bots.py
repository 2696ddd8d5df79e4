#!/usr/bin/env python3
"""Interactive CLI to play a match of Euchre against computer opponents."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from euchre.cards import Card, Suit, card_label, parse_card
from euchre.config import GameConfig
from euchre.match import EuchreGame
from opponents.advice import advise_call, advise_trump


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Euchre against computer opponents.")
    parser.add_argument("--difficulty", choices=["easy", "medium", "hard"], default="medium")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args()


def print_state(game: EuchreGame, seat: int, shown: int) -> int:
    log = game.event_log
    fresh = min(game.events_recorded - shown, len(log))
    for line in log[len(log) - fresh:]:
        print(f"  {line}")
    print("\n============================")
    print(f"Scores -> Your team: {game.scores[seat % 2]}, Opponents: {game.scores[1 - seat % 2]}")
    if game.trump is not None:
        print(f"Trump: {game.trump}   Tricks: {game.tricks_won}")
    elif game.kitty is not None:
        print(f"Turned up: {card_label(game.kitty)}")
    if game.current_trick:
        print("Current trick:")
        for player, card in game.current_trick:
            print(f"  Seat {player} -> {card_label(card)}")
    print("Your hand: " + "  ".join(str(card) for card in game.hands[seat]))
    return game.events_recorded


def prompt(text: str) -> str:
    try:
        return input(text).strip()
    except EOFError:
        print()
        sys.exit(0)


def ask_card(text: str, options: List[Card]) -> Optional[Card]:
    raw = prompt(f"{text} ({' '.join(str(card) for card in options)}), e.g. JH or 10S: ")
    try:
        return parse_card(raw)
    except ValueError as exc:
        print(exc)
        return None


def human_turn(game: EuchreGame, seat: int, difficulty: str) -> None:
    hand = game.hands[seat]
    if game.awaiting_discard:
        card = ask_card("Discard a card", hand)
        if card is not None and not game.discard(card):
            print(f"Rejected: {game.last_rejection}")
        return

    if game.bidding_round == 1 and game.current_bidder == seat:
        assert game.kitty is not None
        advice = advise_trump(hand, game.kitty, difficulty)
        answer = prompt(f"Order up {game.kitty.suit}? [y/n/hint]: ").lower()
        if answer == "hint":
            print(f"Hint: {advice.action} - {advice.rationale}")
        elif answer in {"y", "yes"}:
            game.order_up(seat)
        elif answer in {"n", "no", "pass"}:
            game.pass_bid(seat)
        else:
            print("Unrecognised answer.")
        return

    if game.bidding_round == 2 and game.current_bidder == seat:
        suits = game.available_suits()
        names = "/".join(suit.value for suit in suits)
        answer = prompt(f"Name trump ({names}), 'pass' or 'hint': ").lower()
        if answer == "hint":
            advice = advise_call(hand, suits)
            print(f"Hint: {advice.action} - {advice.rationale}")
        elif answer == "pass":
            game.pass_bid(seat)
        elif answer in {suit.value for suit in Suit}:
            if not game.order_up_second_round(seat, Suit(answer)):
                print(f"Rejected: {game.last_rejection}")
        else:
            print("Unrecognised answer.")
        return

    card = ask_card("Play a card", game.legal_plays(seat))
    if card is not None and not game.play_card(seat, card):
        print(f"Rejected: {game.last_rejection}")


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s")

    config = GameConfig(human_seat=0, difficulty=args.difficulty, seed=args.seed)
    game = EuchreGame(config)
    seat = 0
    game.hand_scored.subscribe(lambda: print(f"\n*** Hand over: {game.event_log[-1]}"))
    game.deal_hands()

    shown = 0
    while not game.is_over:
        shown = print_state(game, seat, shown)
        human_turn(game, seat, args.difficulty)

    print_state(game, seat, shown)
    print("You win!" if game.winner == seat % 2 else "The opponents win.")


if __name__ == "__main__":
    main()
