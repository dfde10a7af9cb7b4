"""Static force catalog: labels, checklists (definition of done) and leak copy.

Everything here is configuration. The five forces and their order never change
at runtime; FORCE_ORDER doubles as the tie-break priority for ranking.
"""

from signal_os.core.forces.types import ChecklistItem, ForceId, ForceInfo, LeakInfo

REFERENCE_BASE_URL = "https://qtmbg.com/signal"

FORCE_ORDER: tuple[ForceId, ...] = (
    ForceId.ESSENCE,
    ForceId.IDENTITY,
    ForceId.OFFER,
    ForceId.SYSTEM,
    ForceId.GROWTH,
)

FORCES: dict[ForceId, ForceInfo] = {
    ForceId.ESSENCE: ForceInfo(
        id=ForceId.ESSENCE,
        label="ESSENCE",
        hint="What you really stand for",
        reference_url=f"{REFERENCE_BASE_URL}/essence",
    ),
    ForceId.IDENTITY: ForceInfo(
        id=ForceId.IDENTITY,
        label="IDENTITY",
        hint="How you are perceived",
        reference_url=f"{REFERENCE_BASE_URL}/identity",
    ),
    ForceId.OFFER: ForceInfo(
        id=ForceId.OFFER,
        label="OFFER",
        hint="What people buy and why",
        reference_url=f"{REFERENCE_BASE_URL}/offer",
    ),
    ForceId.SYSTEM: ForceInfo(
        id=ForceId.SYSTEM,
        label="SYSTEM",
        hint="How leads become cash",
        reference_url=f"{REFERENCE_BASE_URL}/system",
    ),
    ForceId.GROWTH: ForceInfo(
        id=ForceId.GROWTH,
        label="GROWTH",
        hint="How it scales without chaos",
        reference_url=f"{REFERENCE_BASE_URL}/growth",
    ),
}

CHECKLISTS: dict[ForceId, tuple[ChecklistItem, ...]] = {
    ForceId.ESSENCE: (
        ChecklistItem(key="one_sentence", label="One-sentence positioning on hero and bio"),
        ChecklistItem(key="mechanism_named", label="Mechanism named in 2-4 words"),
        ChecklistItem(key="hero_rewritten", label="Hero rewritten: outcome, mechanism, proof, one CTA"),
        ChecklistItem(key="belief_published", label="One owned belief published ('this, not that')"),
    ),
    ForceId.IDENTITY: (
        ChecklistItem(key="signature_element", label="Signature element applied across touchpoints"),
        ChecklistItem(key="authority_post", label="Authority post published (contrarian model)"),
        ChecklistItem(key="top_assets_upgraded", label="Homepage, offer page and one case study upgraded"),
    ),
    ForceId.OFFER: (
        ChecklistItem(key="flagship_chosen", label="Offers collapsed to one flagship plus one step"),
        ChecklistItem(key="pricing_page", label="Pricing page rewritten: one path, one CTA"),
        ChecklistItem(key="teardown_published", label="Offer teardown published"),
    ),
    ForceId.SYSTEM: (
        ChecklistItem(key="happy_path", label="Happy path written in six steps"),
        ChecklistItem(key="lead_capture", label="Lead capture and one follow-up email installed"),
        ChecklistItem(key="booking_filter", label="Booking filter question added"),
        ChecklistItem(key="nurture_loop", label="Weekly nurture loop running"),
    ),
    ForceId.GROWTH: (
        ChecklistItem(key="north_star", label="One metric chosen and tracked weekly"),
        ChecklistItem(key="referral_trigger", label="Referral trigger at first win"),
        ChecklistItem(key="weekly_review", label="Weekly review: metric, bottleneck, one fix"),
    ),
}

LEAKS: dict[ForceId, LeakInfo] = {
    ForceId.ESSENCE: LeakInfo(
        leak_name="BLURRY MECHANISM",
        human_symptom='People say: "Interesting... but what exactly do you do?"',
        what_it_means=(
            "Your value may be strong, but the signal is noisy. If the mechanism isn't named "
            "and repeatable, trust stays slow and price stays fragile."
        ),
        today_move=(
            'Write ONE sentence and place it on your hero + bio: "I help [WHO] get [OUTCOME] '
            'using [MECHANISM] in [TIME]."'
        ),
        week_plan=(
            "Name the mechanism (2-4 words). If you can't name it, you don't own it yet.",
            "Rewrite the hero: Outcome + Mechanism + Proof + One CTA.",
            "Publish one belief you own (a clear 'this, not that').",
        ),
        if_you_dont=(
            "You keep explaining instead of attracting. Calls feel like interviews. "
            "Revenue stays tied to hustle."
        ),
        if_you_do=(
            "Inbound becomes pre-sold. Pricing becomes logical. "
            "People repeat your mechanism for you."
        ),
    ),
    ForceId.IDENTITY: LeakInfo(
        leak_name="STATUS GAP",
        human_symptom="You're good, but you don't look expensive yet.",
        what_it_means=(
            "Your visual + verbal identity isn't matching the level you want to charge. "
            "That creates doubt and negotiation."
        ),
        today_move=(
            "Remove safe language. Replace with proof: outcomes, constraints, numbers, "
            "and one bold claim you can defend."
        ),
        week_plan=(
            "Kill generic visuals (introduce one signature element across touchpoints).",
            "Publish one authority post (your contrarian model).",
            "Upgrade the top 3 assets: homepage, offer page, one case study.",
        ),
        if_you_dont=(
            "You keep justifying price. Prospects shop you against cheaper options. "
            "Resentment builds."
        ),
        if_you_do=(
            "Price objections drop. Prospects interpret premium as obvious. Better leads arrive."
        ),
    ),
    ForceId.OFFER: LeakInfo(
        leak_name="VALUE CONFUSION",
        human_symptom="People like you... but don't buy fast.",
        what_it_means=(
            "No single obvious flagship path. Too many options or too much custom "
            "creates hesitation."
        ),
        today_move=(
            'Choose one flagship. Write: "This is for X. You get Y by Z. '
            'If you\'re not X, do not apply."'
        ),
        week_plan=(
            "Collapse offers -> 1 flagship + 1 entry or ascension step.",
            "Rewrite pricing page (one path, one CTA).",
            "Publish one teardown: show how your offer creates the after-state.",
        ),
        if_you_dont="More proposals. More 'let me think.' Close rate stays fragile.",
        if_you_do=(
            "Decision time drops from weeks to days. Scarcity becomes real. Demand tightens."
        ),
    ),
    ForceId.SYSTEM: LeakInfo(
        leak_name="PIPELINE FRICTION",
        human_symptom="You're busy... but revenue isn't predictable.",
        what_it_means=(
            "Your path from attention -> cash leaks. You might have demand signals, "
            "but not a controlled system."
        ),
        today_move=(
            "Write your happy path in 6 steps: Viewer -> Lead -> Call -> Close -> "
            "Onboard -> Referral."
        ),
        week_plan=(
            "Install one lead capture + one follow-up email.",
            "Add one booking filter question to repel bad fits.",
            "Create one nurture loop (weekly proof + CTA).",
        ),
        if_you_dont=(
            "Growth stays random. You work harder for unstable cash. Scaling becomes heavier."
        ),
        if_you_do="You can forecast. You know inputs -> outputs. You regain control.",
    ),
    ForceId.GROWTH: LeakInfo(
        leak_name="NO NORTH STAR",
        human_symptom="You're moving... but direction keeps changing.",
        what_it_means=(
            "No clean metric + rhythm. Growth becomes reactive, emotional, and exhausting."
        ),
        today_move=(
            "Pick ONE metric for 30 days (qualified leads/week, close rate, or LTV). "
            "Track weekly on the same day."
        ),
        week_plan=(
            "Choose one channel to dominate for 30 days.",
            "Build one referral trigger (ask at the moment of first win).",
            "Create a weekly review: metric -> bottleneck -> one fix -> repeat.",
        ),
        if_you_dont="More tactics, less momentum. Breakthrough stays out of reach.",
        if_you_do="Decisions become obvious. You build momentum without chaos.",
    ),
}


def get_force(force_id: ForceId | str) -> ForceInfo:
    """Label, hint and reference link for a force."""
    return FORCES[ForceId(force_id)]


def get_checklist(force_id: ForceId | str) -> tuple[ChecklistItem, ...]:
    """Checklist items for a force, in catalog order."""
    return CHECKLISTS[ForceId(force_id)]


def get_leak(force_id: ForceId | str) -> LeakInfo:
    """Leak diagnosis copy for a force."""
    return LEAKS[ForceId(force_id)]
