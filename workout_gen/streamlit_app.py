from __future__ import annotations

# Ensure the repository root is on sys.path so that absolute imports like `workout_gen.*` work
# when Streamlit runs this file from within the package directory.
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from typing import List
from uuid import uuid4

import streamlit as st

from workout_gen.config import configure_logging
from workout_gen.models import GeneratedPlan, GenerationRequest, MuscleQuota
from workout_gen.services import (
    alternate_by_muscle_group,
    apply_reroll,
    available_tags,
    build_pool,
    can_reroll,
    default_store,
    generate,
    generate_plan_name,
    load_library,
    new_generated_plan,
    prune_history,
    regenerate,
    reroll,
    toggle_pin,
    validate,
)

st.set_page_config(page_title="Random Workout Generator", page_icon="🎲", layout="wide")
configure_logging()


@st.cache_resource
def get_pool():
    return build_pool(load_library())


pool = get_pool()
tags = available_tags(pool)
store = default_store()


def quota_row(tag: str, count: int) -> dict:
    # widgets are keyed by row id so deleting a row does not shift state
    return {"id": uuid4().hex, "tag": tag, "count": count}


if "plan" not in st.session_state:
    st.session_state["plan"] = None
if "history" not in st.session_state:
    st.session_state["history"] = {}
if "quota_rows" not in st.session_state:
    st.session_state["quota_rows"] = [quota_row(tags[0] if tags else "", 2)]


def read_quotas() -> List[MuscleQuota]:
    return [MuscleQuota(tag=row["tag"], count=int(row["count"])) for row in st.session_state["quota_rows"] if row["tag"]]


with st.sidebar:
    st.header("Muscle quotas")
    rows = st.session_state["quota_rows"]
    for row in rows:
        c1, c2, c3 = st.columns([3, 2, 1])
        with c1:
            row["tag"] = st.selectbox("Muscle", tags, index=tags.index(row["tag"]) if row["tag"] in tags else 0,
                                      key=f"q-tag-{row['id']}", label_visibility="collapsed")
        with c2:
            row["count"] = st.number_input("Count", min_value=1, max_value=10, value=int(row["count"]),
                                           key=f"q-count-{row['id']}", label_visibility="collapsed")
        with c3:
            if st.button("✕", key=f"q-del-{row['id']}") and len(rows) > 1:
                rows.remove(row)
                st.rerun()
    if st.button("Add muscle group", key="q-add", use_container_width=True):
        rows.append(quota_row(tags[0] if tags else "", 1))
        st.rerun()

    circuit = st.toggle("Circuit (alternate muscle groups)", value=False)

    if st.button("Generate workout", type="primary", use_container_width=True):
        request = GenerationRequest(quotas=read_quotas())
        report = validate(request, pool)
        for issue in report.warnings():
            st.warning(issue.message)
        if not report.valid:
            for issue in report.errors():
                st.error(issue.message)
        else:
            result = generate(request, pool)
            for err in result.errors:
                st.warning(err)
            exercises = result.exercises
            if circuit and len(exercises) > 1:
                exercises = alternate_by_muscle_group(exercises)
            if not exercises:
                st.error("No exercises could be generated. Please adjust your quotas.")
            else:
                st.session_state["plan"] = new_generated_plan(exercises)
                st.session_state["plan_name"] = generate_plan_name()
                st.session_state["history"] = {}
                st.toast("Workout generated.")

    st.divider()
    st.subheader("Templates")
    with st.form("save-template", clear_on_submit=True):
        tpl_name = st.text_input("Template name", max_chars=50)
        if st.form_submit_button("Save current quotas"):
            saved = store.save(tpl_name, read_quotas())
            if saved.success:
                st.toast(f"Saved \"{saved.template.name}\".")  # type: ignore[union-attr]
            else:
                st.error(saved.message or "Failed to save template.")
    for tpl in store.list():
        c1, c2, c3 = st.columns([3, 1, 1])
        c1.caption(f"{tpl.name} · " + ", ".join(f"{q.tag}×{q.count}" for q in tpl.quotas))
        if c2.button("Load", key=f"tpl-load-{tpl.id}"):
            st.session_state["quota_rows"] = [quota_row(q.tag, q.count) for q in tpl.quotas]
            st.rerun()
        if c3.button("🗑", key=f"tpl-del-{tpl.id}"):
            res = store.delete(tpl.id)
            if not res.success:
                st.error(res.message or "Failed to delete template.")
            st.rerun()

plan: GeneratedPlan | None = st.session_state.get("plan")

if plan is None:
    st.info("Pick muscle groups and counts in the sidebar, then click Generate workout.")
else:
    head_col, action_col = st.columns([6, 2])
    with head_col:
        st.subheader(st.session_state.get("plan_name", "Random Workout"))
    with action_col:
        if st.button("🔁 Regenerate unpinned", use_container_width=True, disabled=plan.all_pinned()):
            outcome = regenerate(plan, pool)
            for w in outcome.warnings:
                st.warning(w)
            st.session_state["plan"] = outcome.plan
            st.session_state["history"] = prune_history(st.session_state["history"], outcome.plan)
            st.rerun()

    history = st.session_state["history"]
    for ex in plan.exercises:
        with st.container(border=True):
            title_col, pin_col, reroll_col = st.columns([8, 1, 1])
            with title_col:
                st.markdown(f"**{ex.name}**  \n{ex.source_tag} · {ex.sets} × {ex.reps}"
                            + (f" · rest {ex.rest}" if ex.rest else ""))
            with pin_col:
                label = "📌" if plan.is_pinned(ex.id) else "📍"
                if st.button(label, key=f"pin-{ex.id}", help="Pin to keep through regeneration"):
                    st.session_state["plan"] = toggle_pin(plan, ex.id)
                    st.rerun()
            with reroll_col:
                enabled = can_reroll(plan, ex.id, pool, history)
                if st.button("🎲", key=f"reroll-{ex.id}", disabled=not enabled,
                             help="Reroll to a different exercise" if enabled
                             else "No other exercises available for this muscle group"):
                    replacement, new_history = reroll(plan, ex.id, pool, history)
                    if replacement is not None:
                        new_plan = apply_reroll(plan, ex.id, replacement)
                        st.session_state["plan"] = new_plan
                        st.session_state["history"] = prune_history(new_history, new_plan)
                    st.rerun()
