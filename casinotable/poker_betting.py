"""One player's turn in a poker betting round: check, call, bet, raise, all-in or fold."""

from __future__ import annotations

from typing import Optional

from .poker_table import (
    FOLD_SOUND,
    Player,
    PlayerStatus,
    Table,
    chip_sound,
)

CHECK = "CHECK"
CALL = "CALL"
BET = "BET"
RAISE = "RAISE"
ALL_IN = "ALLIN"
FOLD = "FOLD"


class BettingRound:
    """Applies the acting player's choice to the table and moves play on.

    The acting seat is always ``table.next_to_play``. After each action the
    flags ``round_complete``, ``showdown_due`` and ``hand_over`` describe
    what the table should do next, and ``last_sound`` holds the effect played.
    """

    def __init__(self, table: Table) -> None:
        self.table = table
        self.to_call = 0
        self.facing_bet = False
        self.cant_raise = False
        self.potential_bet = 0
        self.round_complete = False
        self.showdown_due = False
        self.last_sound: Optional[int] = None
        self._prepare()

    @property
    def seat(self) -> int:
        return self.table.next_to_play

    @property
    def player(self) -> Player:
        return self.table.players[self.seat]

    @property
    def hand_over(self) -> bool:
        """True once every player but one has folded."""
        return self.table.in_the_hand == 1

    def _prepare(self) -> None:
        table = self.table
        player = self.player
        self.to_call = max(table.current_bet - player.in_the_pot, 0)
        self.facing_bet = player.in_the_pot < table.current_bet
        self.cant_raise = player.cash <= self.to_call or table.in_play == 1
        step = table.min_bet_raise if self.facing_bet else table.big_blind
        self.potential_bet = self.to_call + step

    def _begin(self) -> None:
        self.round_complete = False
        self.showdown_due = False
        self._prepare()

    def options(self) -> tuple[str, Optional[str], str]:
        """Return the three choices: check or call, the bet/raise/all-in choice or None, fold."""
        self._prepare()
        cash = self.player.cash
        middle: Optional[str] = None
        if not self.cant_raise:
            if cash > self.potential_bet:
                middle = RAISE if self.facing_bet else BET
            elif cash > self.to_call:
                middle = ALL_IN
        return (CALL if self.facing_bet else CHECK), middle, FOLD

    def _drop_from_play(self, player: Player) -> None:
        player.status &= ~PlayerStatus.IN_PLAY
        self.table.in_play -= 1

    def _close_turn(self, closes: bool) -> Optional[int]:
        table = self.table
        if self.hand_over:
            return None
        if closes:
            table.deal_states += 1
            self.round_complete = True
            self.showdown_due = table.stage == 3
        return table.next_to_act()

    def _reopen(self) -> int:
        self.table.last_to_act()
        return self.table.next_to_act()

    def check_call(self) -> Optional[int]:
        """Check, or call the outstanding bet; return the next seat to act."""
        self._begin()
        player = self.player
        closes = self.seat == self.table.last_to_play
        self.last_sound = None
        if self.facing_bet:
            owed = self.table.current_bet - player.in_the_pot
            if player.cash >= owed:
                player.cash -= owed
                player.in_the_pot += owed
                player.not_calling = 0
                if player.cash == 0:
                    self._drop_from_play(player)
            else:
                player.in_the_pot += player.cash
                player.cash = 0
                self._drop_from_play(player)
            self.last_sound = chip_sound(self.to_call, self.table.buy_in)
        return self._close_turn(closes)

    def fold(self) -> Optional[int]:
        """Fold the hand; return the next seat, or None when one player is left."""
        self._begin()
        player = self.player
        closes = self.seat == self.table.last_to_play
        player.status |= PlayerStatus.FOLDED
        self.table.in_the_hand -= 1
        self._drop_from_play(player)
        self.last_sound = FOLD_SOUND
        return self._close_turn(closes)

    def slider_steps(self) -> list[int]:
        """Return the amounts the raise slider offers, smallest first, ending at the player's cash."""
        self._prepare()
        cash = self.player.cash
        if self.cant_raise or cash <= self.potential_bet:
            return []
        big_blind = self.table.big_blind
        max_steps = (cash - self.potential_bet) // big_blind
        amounts = [self.potential_bet + k * big_blind for k in range(max_steps + 1)]
        if amounts[-1] != cash:
            amounts.append(cash)
        return amounts

    def raise_by(self, amount: int) -> int:
        """Put ``amount`` in (call plus raise) and reopen the betting; return the next seat."""
        self._begin()
        steps = self.slider_steps()
        if not steps:
            raise ValueError("this player cannot bet or raise")
        if amount not in steps:
            raise ValueError(f"{amount} is not a bet the slider offers")
        table = self.table
        player = self.player
        player.cash -= amount
        player.in_the_pot += amount
        if player.cash == 0:
            self._drop_from_play(player)
        table.min_bet_raise = amount - self.to_call
        table.current_bet += table.min_bet_raise
        player.not_calling = table.min_bet_raise
        self.last_sound = chip_sound(amount, table.buy_in)
        return self._reopen()

    def all_in(self) -> int:
        """Push every chip when that is the only bet left; return the next seat."""
        if self.options()[1] != ALL_IN:
            raise ValueError("going all in is not one of the choices")
        self._begin()
        table = self.table
        player = self.player
        pushed = player.cash
        self.last_sound = chip_sound(pushed, table.buy_in)
        player.in_the_pot += pushed
        table.current_bet += pushed - self.to_call
        player.cash = 0
        self._drop_from_play(player)
        return self._reopen()

    def ai_raise(self, bet: int) -> Optional[int]:
        """Raise for a computer player, going all in if short; calls instead when raising is barred."""
        self._begin()
        if self.cant_raise:
            return self.check_call()
        table = self.table
        player = self.player
        if player.cash > bet:
            if bet <= self.to_call:
                raise ValueError("a raise must be larger than the amount to call")
            player.in_the_pot += bet
            player.cash -= bet
            table.min_bet_raise = bet - self.to_call
            self.last_sound = chip_sound(bet, table.buy_in)
        else:
            pushed = player.cash
            table.min_bet_raise = pushed - self.to_call
            player.in_the_pot += pushed
            player.cash = 0
            self._drop_from_play(player)
            self.last_sound = chip_sound(pushed, table.buy_in)
        table.current_bet += table.min_bet_raise
        return self._reopen()