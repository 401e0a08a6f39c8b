"""Streamlit card picker for the poker hand evaluator.

Run with:
    streamlit run src/poker_hand_evaluator/gui/app.py
"""

from __future__ import annotations

import logging

import streamlit as st

from poker_hand_evaluator.config.settings import Settings, get_settings
from poker_hand_evaluator.main import setup_logging
from poker_hand_evaluator.models.hand import Card
from poker_hand_evaluator.selection.hand_selection import HandSelection, create_deck

logger = logging.getLogger(__name__)

SESSION_KEY = "selection"


def card_label(card: Card) -> str:
    """Button label for a card, red for hearts and diamonds."""
    text = f"{card.rank.symbol} {card.suit.symbol}"
    return f":red[{text}]" if card.suit.is_red else text


def get_selection(settings: Settings) -> HandSelection:
    """Get the per-session selection, creating it on first run."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = HandSelection(max_cards=settings.max_selection)
        logger.debug("Created new hand selection for session")
    selection: HandSelection = st.session_state[SESSION_KEY]
    return selection


def render_selected_cards(selection: HandSelection) -> None:
    """Render selected cards; clicking one removes it."""
    if not selection.cards:
        st.caption("Pick cards from the grid below.")
        return

    columns = st.columns(selection.max_cards)
    for column, card in zip(columns, selection.cards):
        with column:
            st.button(
                card_label(card),
                key=f"selected-{card.key}",
                on_click=selection.toggle,
                args=(card,),
            )


def render_messages(selection: HandSelection) -> None:
    """Render hand rank, selection error and remaining-count prompt."""
    hand_rank = selection.evaluate()
    if hand_rank is not None:
        st.success(f"Hand Rank: {hand_rank.display_name}")
    if selection.error:
        st.error(selection.error)
    if selection.status_message:
        st.info(selection.status_message)


def render_card_grid(selection: HandSelection, grid_columns: int) -> None:
    """Render all 52 cards as toggle buttons."""
    deck = create_deck()
    for start in range(0, len(deck), grid_columns):
        columns = st.columns(grid_columns)
        for column, card in zip(columns, deck[start : start + grid_columns]):
            with column:
                st.button(
                    card_label(card),
                    key=f"grid-{card.key}",
                    type="primary" if selection.is_selected(card) else "secondary",
                    disabled=selection.is_disabled(card),
                    on_click=selection.toggle,
                    args=(card,),
                )


def main() -> None:
    """Render the card picker page."""
    settings = get_settings()
    setup_logging(settings.log_level)

    st.set_page_config(page_title=settings.gui.page_title, layout="wide")
    st.title(settings.gui.page_title)

    selection = get_selection(settings)

    render_selected_cards(selection)
    render_messages(selection)

    st.divider()
    render_card_grid(selection, settings.gui.grid_columns)

    if selection.cards:
        st.button("Reset Hand", key="reset", type="primary", on_click=selection.reset)


main()
