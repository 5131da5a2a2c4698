import logging
import time
from datetime import datetime

import streamlit as st

from calculator import build_result_export, calculate, clamp_inputs
from config import FLOW_ITEMS, INFO_CARDS, SLIDERS, TEXTS, settings
from formatting import num, stat_cards
from tile import TileState

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("piezo_tiles")


# ----------------------------
# Helpers
# ----------------------------
def flow_item(icon: str, title: str, desc: str, active: bool) -> str:
    cls = "flow active" if active else "flow"
    return (
        f'<div class="{cls}"><span class="flow-icon">{icon}</span>'
        f"<div><div class='flow-title'>{title}</div><div class='flow-desc'>{desc}</div></div></div>"
    )


def tile_face(active: bool) -> str:
    cls = "tile charged" if active else "tile"
    return f'<div class="{cls}"><div class="tile-label">Click to step ⚡</div></div>'


def render_tile_panel(slot, tile: TileState, active: bool):
    with slot.container():
        left, right = st.columns(2)
        with left:
            st.markdown(tile_face(active), unsafe_allow_html=True)
            st.caption(f"Live steps on demo tile: **{tile.steps}**")
        with right:
            st.markdown(
                "".join(flow_item(icon, title, desc, active) for icon, title, desc in FLOW_ITEMS),
                unsafe_allow_html=True,
            )


def tile_demo(tile: TileState):
    st.subheader("👣 Try the Tile")
    if st.button("Step on the tile", key="tile_step"):
        tile.step(time.monotonic())

    slot = st.empty()
    render_tile_panel(slot, tile, active=tile.is_charged(time.monotonic()))
    return slot


# ----------------------------
# App config
# ----------------------------
st.set_page_config(page_title=TEXTS["title"], page_icon="⚡", layout="wide")

st.markdown("""
<style>
.tile { position: relative; width: 13rem; height: 13rem; border-radius: 1.5rem;
        background: #1e293b; box-shadow: inset 0 0 0 4px #334155;
        background-image: radial-gradient(circle at 1px 1px, rgba(255,255,255,.3) 1px, transparent 0);
        background-size: 16px 16px; transition: background-color .2s; }
.tile.charged { background-color: rgba(52, 211, 153, .35); }
.tile-label { position: absolute; bottom: .5rem; width: 100%; text-align: center;
              font-size: .85rem; color: #cbd5e1; }
.flow { display: flex; gap: .5rem; align-items: center; padding: .75rem; margin-bottom: .75rem;
        border-radius: 1rem; box-shadow: 0 0 0 1px #1e293b; }
.flow.active { background: rgba(6, 78, 59, .2); box-shadow: 0 0 0 1px rgba(4, 120, 87, .4); }
.flow-title { font-size: .9rem; font-weight: 600; }
.flow-desc { font-size: .75rem; color: #cbd5e1; }
</style>
""", unsafe_allow_html=True)


# ----------------------------
# Hero
# ----------------------------
hero_left, hero_right = st.columns([1, 1])

with hero_left:
    st.caption(f"✨ {TEXTS['badge']}")
    st.title(TEXTS["title"])
    st.write(TEXTS["intro"])
    st.markdown("[See How It Works](#how-it-works) · [Impact Calculator](#impact-calculator)")

tile = st.session_state.setdefault("tile", TileState())

with hero_right:
    tile_slot = tile_demo(tile)


# ----------------------------
# How it works
# ----------------------------
st.header("How it works", anchor="how-it-works")
for col, (icon, title, body) in zip(st.columns(3), INFO_CARDS):
    with col:
        with st.container(border=True):
            st.markdown(f"#### {icon} {title}")
            st.write(body)


# ----------------------------
# Calculator
# ----------------------------
st.header("🧮 Impact Calculator", anchor="impact-calculator")
col_in, col_out = st.columns([1, 2])

with col_in:
    with st.container(border=True):
        values = {}
        for key, (label, lo, hi, step, dflt, unit, decimals) in SLIDERS.items():
            values[key] = st.slider(label, lo, hi, dflt, step, key=f"calc_{key}")
            st.caption(f"{num(values[key], decimals)} {unit}".strip())

inputs = clamp_inputs(values)
result = calculate(inputs)

with col_out:
    with st.container(border=True):
        cards = stat_cards(inputs, result)
        for row in (cards[:3], cards[3:]):
            for col, (title, value, subtitle) in zip(st.columns(3), row):
                col.metric(title, value)
                col.caption(subtitle)

        st.markdown(TEXTS["assumptions"])
        st.markdown("\n".join(f"- {line}" for line in TEXTS["assumption_bullets"]))

        cta_col, sites_col = st.columns([1, 2])
        cta_col.markdown("[**Request a Demo**](#contact)")
        sites_col.markdown(TEXTS["ideal_sites"])

        export_df = build_result_export(inputs, result)
        csv_bytes = export_df.to_csv(index=False).encode("utf-8")
        st.download_button("Download estimate (CSV)", data=csv_bytes,
                           file_name="tile_impact_estimate.csv", mime="text/csv")


# ----------------------------
# Contact / Footer
# ----------------------------
st.divider()
st.header(TEXTS["contact_title"], anchor="contact")
contact_left, contact_right = st.columns(2)

with contact_left:
    st.write(TEXTS["contact_intro"])

with contact_right:
    with st.form("contact"):
        st.text_input("Your Name", key="contact_name")
        st.text_input("Email or Phone", key="contact_reach")
        st.text_area("Tell us your area (sq ft) & daily footfall", key="contact_notes")
        if st.form_submit_button("Send Inquiry"):
            logger.info("Demo inquiry submitted (not stored)")
            st.info(TEXTS["contact_sent"])

st.caption(f"© {datetime.now().year} {settings.BRAND_NAME}. For demonstration and academic use.")


# ----------------------------
# Tile highlight reset
# ----------------------------
# Last, so the page is fully drawn before the wait. A click during the wait re-arms the deadline.
now = time.monotonic()
if tile.is_charged(now):
    time.sleep(tile.remaining(now))
    render_tile_panel(tile_slot, tile, active=False)
