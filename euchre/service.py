"""Convenience service layer for UI consumers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .cards import Card, Suit, card_label, deserialize_card, serialize_card
from .config import GameConfig
from .game import HandPhase
from .match import EuchreGame


@dataclass
class TrickPlayView:
    seat: int
    card: dict
    label: str


@dataclass
class BiddingView:
    round: int
    current_bidder: Optional[int]
    turned_down: Optional[str]
    available_suits: list[str]
    trump_caller: Optional[int]
    history: list[dict]


@dataclass
class TableView:
    phase: str
    perspective: int
    dealer: Optional[int]
    current_actor: Optional[int]
    trump: Optional[str]
    kitty: Optional[dict]
    hand: list[dict]
    hand_labels: list[str]
    legal_plays: list[dict]
    legal_play_labels: list[str]
    hand_sizes: list[int]
    trick: list[TrickPlayView]
    tricks_won: list[int]
    awaiting_discard: bool
    bidding: Optional[BiddingView]
    scores: list[int]
    winner: Optional[int]
    event_log: list[str]


class TableService:
    """Facade around EuchreGame that speaks in plain payloads."""

    def __init__(self, game: Optional[EuchreGame] = None, config: Optional[GameConfig] = None) -> None:
        self.game = game or EuchreGame(config)

    # Actions -----------------------------------------------------------

    def deal(self) -> bool:
        return self.game.deal_hands()

    def order_up(self, seat: int) -> bool:
        return self.game.order_up(seat)

    def pass_bid(self, seat: int) -> bool:
        return self.game.pass_bid(seat)

    def call_trump(self, seat: int, suit_name: str) -> bool:
        return self.game.order_up_second_round(seat, Suit(suit_name.lower()))

    def discard(self, card_payload: dict) -> bool:
        return self.game.discard(deserialize_card(card_payload))

    def play_card(self, seat: int, card_payload: dict) -> bool:
        return self.game.play_card(seat, deserialize_card(card_payload))

    # Views -------------------------------------------------------------

    def get_view(self, perspective: Optional[int] = None) -> TableView:
        game = self.game
        if perspective is None:
            perspective = game.config.human_seat if game.config.human_seat is not None else 0
        hand = game.hand

        bidding_view: Optional[BiddingView] = None
        phase = "idle"
        dealer: Optional[int] = None
        visible: Sequence[Card] = []
        hand_sizes = [0, 0, 0, 0]
        if hand is not None:
            phase = "over" if game.is_over else hand.phase.name.lower()
            dealer = hand.dealer
            visible = hand.hands[perspective]
            hand_sizes = [len(cards) for cards in hand.hands]
            bidding = hand.bidding
            if hand.phase == HandPhase.BIDDING or bidding.history:
                bidding_view = BiddingView(
                    round=bidding.round_number,
                    current_bidder=game.current_bidder,
                    turned_down=bidding.turned_down.value if bidding.turned_down else None,
                    available_suits=[suit.value for suit in hand.available_suits()],
                    trump_caller=bidding.trump_caller,
                    history=[
                        {"seat": seat, "action": action, "suit": suit.value if suit else None}
                        for seat, action, suit in bidding.history
                    ],
                )

        legal = game.legal_plays(perspective)
        kitty = game.kitty
        return TableView(
            phase=phase,
            perspective=perspective,
            dealer=dealer,
            current_actor=game.current_actor(),
            trump=game.trump.value if game.trump else None,
            kitty=serialize_card(kitty) if kitty else None,
            hand=[serialize_card(card) for card in visible],
            hand_labels=[card_label(card) for card in visible],
            legal_plays=[serialize_card(card) for card in legal],
            legal_play_labels=[card_label(card) for card in legal],
            hand_sizes=hand_sizes,
            trick=[
                TrickPlayView(seat=seat, card=serialize_card(card), label=card_label(card))
                for seat, card in game.current_trick
            ],
            tricks_won=game.tricks_won,
            awaiting_discard=game.awaiting_discard,
            bidding=bidding_view,
            scores=list(game.scores),
            winner=game.winner,
            event_log=game.event_log,
        )
