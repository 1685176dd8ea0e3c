"""Static catalog of monetization strategy templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Tuple

from .schemas import Asset, Preference, RiskTolerance


class CatalogError(RuntimeError):
    """Raised when the static catalog breaks one of its invariants."""


class MetricFocus(str, Enum):
    """What a strategy's own success metric measures."""

    PIPELINE = "pipeline"
    REACH = "reach"
    EFFICIENCY = "efficiency"
    RETENTION = "retention"


@dataclass(frozen=True)
class ScoreWeights:
    """Weight of each fit signal for one template."""

    preference: float = 40.0
    risk: float = 25.0
    assets: float = 15.0
    capacity: float = 15.0
    skills: float = 5.0


@dataclass(frozen=True)
class ActionTemplate:
    label: str
    detail: str


@dataclass(frozen=True)
class MetricTemplate:
    """Metric text with ``{revenue}``, ``{cost}``, ``{weeks}`` and ``{units}`` fields.

    ``units`` is the projected monthly revenue divided by ``unit_value``.
    """

    focus: MetricFocus
    label: str
    target: str
    why: str
    unit_value: float = 1.0


@dataclass(frozen=True)
class StrategyTemplate:
    """Describe one monetization approach and when it applies."""

    id: str
    title: str
    description: str
    rationale: str
    preferences: FrozenSet[Preference]
    risk_bands: FrozenSet[RiskTolerance]
    min_capital: float
    max_capital: float
    reference_capital: float
    min_hours: float
    reference_hours: float
    base_startup_cost: float
    min_startup_cost: float
    base_monthly_revenue: float
    base_timeline_weeks: int
    actions: Tuple[ActionTemplate, ...]
    leverage_points: Tuple[str, ...]
    reinvestment: str
    keywords: Tuple[str, ...]
    asset_affinities: FrozenSet[Asset]
    metric: MetricTemplate
    weights: ScoreWeights = field(default_factory=ScoreWeights)


STRATEGY_CATALOG: Tuple[StrategyTemplate, ...] = (
    StrategyTemplate(
        id="productized-service-sprint",
        title="Productized service sprint",
        description="Package one outcome you already deliver into a fixed-scope, fixed-price sprint.",
        rationale="A fixed offer built on {skill} sells fast, and {asset} gives buyers proof before the first call.",
        preferences=frozenset({Preference.SERVICE}),
        risk_bands=frozenset({RiskTolerance.LOW, RiskTolerance.MEDIUM}),
        min_capital=0,
        max_capital=1_500,
        reference_capital=300,
        min_hours=5,
        reference_hours=12,
        base_startup_cost=150,
        min_startup_cost=20,
        base_monthly_revenue=3_000,
        base_timeline_weeks=4,
        actions=(
            ActionTemplate("Define the sprint", "Write a one-page scope with a single outcome, a deadline and a flat price."),
            ActionTemplate("Publish the offer", "Ship a landing page with two proof points and a booking link."),
            ActionTemplate("Run 15 outreach conversations", "Message warm contacts who already have the problem you solve."),
            ActionTemplate("Deliver and capture proof", "Finish the first sprint and turn the result into a case study."),
        ),
        leverage_points=(
            "Reuse the same delivery checklist for every client.",
            "Ask each client for one referral at handoff.",
        ),
        reinvestment="Put the first sprint profits into a delivery template library that cuts fulfilment hours.",
        keywords=("consult", "copy", "design", "sales", "strategy", "writing", "marketing"),
        asset_affinities=frozenset({Asset.CONSULTING_CASE_STUDIES, Asset.SALES_SCRIPTS, Asset.DESIGN_PORTFOLIO}),
        metric=MetricTemplate(
            focus=MetricFocus.PIPELINE,
            label="Booked sprint calls",
            target="{units} paying sprint clients per month",
            why="Calls booked is the leading signal for service revenue; an empty calendar shows up weeks before an empty bank account.",
            unit_value=1_500,
        ),
    ),
    StrategyTemplate(
        id="fractional-operator-retainer",
        title="Fractional operator retainer",
        description="Sell a monthly retainer where you own one function part-time for a growing company.",
        rationale="Companies rent senior {skill} help before they can hire it, and {asset} shortens the trust gap.",
        preferences=frozenset({Preference.SERVICE}),
        risk_bands=frozenset({RiskTolerance.MEDIUM, RiskTolerance.HIGH}),
        min_capital=0,
        max_capital=5_000,
        reference_capital=1_000,
        min_hours=10,
        reference_hours=20,
        base_startup_cost=600,
        min_startup_cost=50,
        base_monthly_revenue=6_000,
        base_timeline_weeks=6,
        actions=(
            ActionTemplate("Pick the function", "Choose the one function you can own end to end and list its monthly deliverables."),
            ActionTemplate("Build a target list", "Shortlist 30 funded companies without an in-house lead for that function."),
            ActionTemplate("Pitch a 30-day trial", "Offer a paid trial month that converts into a quarterly retainer."),
            ActionTemplate("Report monthly wins", "Send a one-page results memo at the end of every month."),
        ),
        leverage_points=(
            "Standardise the monthly report so it doubles as a sales asset.",
            "Price on outcomes owned, not hours worked.",
        ),
        reinvestment="Hire a part-time assistant from retainer income so you can carry a second client.",
        keywords=("operations", "marketing", "sales", "management", "finance", "product"),
        asset_affinities=frozenset({Asset.CONSULTING_CASE_STUDIES, Asset.SALES_SCRIPTS, Asset.AUDIENCE}),
        metric=MetricTemplate(
            focus=MetricFocus.RETENTION,
            label="Retainer renewals",
            target="Renew {units} retainers at the end of each quarter",
            why="Renewals compound; every retained client removes a month of prospecting.",
            unit_value=3_000,
        ),
    ),
    StrategyTemplate(
        id="done-for-you-automation",
        title="Done-for-you automation builds",
        description="Build fixed-price workflow automations for small teams drowning in manual tasks.",
        rationale="Teams pay to get hours back; {skill} plus {asset} lets you show a working demo on the first call.",
        preferences=frozenset({Preference.AUTOMATION, Preference.SERVICE}),
        risk_bands=frozenset({RiskTolerance.LOW, RiskTolerance.MEDIUM}),
        min_capital=0,
        max_capital=3_000,
        reference_capital=500,
        min_hours=6,
        reference_hours=15,
        base_startup_cost=250,
        min_startup_cost=30,
        base_monthly_revenue=4_000,
        base_timeline_weeks=5,
        actions=(
            ActionTemplate("Pick three workflows", "Choose three repeatable automations such as lead routing, invoicing or reporting."),
            ActionTemplate("Record demo builds", "Build each workflow once and record a two-minute walkthrough."),
            ActionTemplate("Offer an audit", "Run free 20-minute audits that end with a fixed-price build quote."),
            ActionTemplate("Add maintenance plans", "Convert every finished build into a monthly monitoring plan."),
        ),
        leverage_points=(
            "Turn each build into a reusable template.",
            "Bundle monitoring into a recurring plan.",
        ),
        reinvestment="Reinvest build fees into premium automation tooling that lets one build serve many clients.",
        keywords=("automation", "zapier", "make", "python", "integration", "no-code", "ops"),
        asset_affinities=frozenset({Asset.AUTOMATION_TOOLS, Asset.CODEBASE, Asset.CONSULTING_CASE_STUDIES}),
        metric=MetricTemplate(
            focus=MetricFocus.EFFICIENCY,
            label="Build delivery time",
            target="Ship each build within {weeks} weeks while closing {units} builds per month",
            why="Shorter delivery time is the margin in a fixed-price automation business.",
            unit_value=1_200,
        ),
    ),
    StrategyTemplate(
        id="automation-agency",
        title="Automation agency with retainers",
        description="Run a small agency that designs, runs and maintains AI-assisted automations on retainer.",
        rationale="Recurring automation work scales past your own hours once {asset} and your {skill} background anchor the offer.",
        preferences=frozenset({Preference.AUTOMATION}),
        risk_bands=frozenset({RiskTolerance.MEDIUM, RiskTolerance.HIGH}),
        min_capital=500,
        max_capital=20_000,
        reference_capital=5_000,
        min_hours=15,
        reference_hours=30,
        base_startup_cost=2_500,
        min_startup_cost=200,
        base_monthly_revenue=9_000,
        base_timeline_weeks=10,
        actions=(
            ActionTemplate("Choose a vertical", "Pick one industry and map its five most expensive manual workflows."),
            ActionTemplate("Productize the stack", "Package a standard automation stack with onboarding and SLAs."),
            ActionTemplate("Launch outbound", "Run a targeted outbound campaign with a case-study-led script."),
            ActionTemplate("Hire a builder", "Bring on a contract builder and document the delivery playbook."),
        ),
        leverage_points=(
            "Sell retainers, not projects.",
            "Reuse the same stack across every client in the vertical.",
        ),
        reinvestment="Route agency profit into a contract builder so delivery no longer depends on your hours.",
        keywords=("automation", "ai", "agents", "sales", "operations", "engineering"),
        asset_affinities=frozenset(
            {Asset.AUTOMATION_TOOLS, Asset.SALES_SCRIPTS, Asset.CAPITAL_ACCESS, Asset.CODEBASE}
        ),
        metric=MetricTemplate(
            focus=MetricFocus.EFFICIENCY,
            label="Hours saved per client",
            target="Deliver {units} active retainers with onboarding under {weeks} weeks",
            why="Hours saved is what clients renew for, and it is the proof that sells the next retainer.",
            unit_value=2_500,
        ),
    ),
    StrategyTemplate(
        id="digital-template-shop",
        title="Digital template shop",
        description="Sell ready-made templates, kits and spreadsheets that package what you already know.",
        rationale="Templates turn {skill} into a product that sells while you sleep, and {asset} supplies the first buyers.",
        preferences=frozenset({Preference.PRODUCT, Preference.CONTENT}),
        risk_bands=frozenset({RiskTolerance.LOW}),
        min_capital=0,
        max_capital=1_000,
        reference_capital=200,
        min_hours=3,
        reference_hours=8,
        base_startup_cost=80,
        min_startup_cost=15,
        base_monthly_revenue=1_200,
        base_timeline_weeks=3,
        actions=(
            ActionTemplate("Pick a painful job", "Choose one recurring task your audience does by hand."),
            ActionTemplate("Ship the first template", "Build and list a template with a clear before and after preview."),
            ActionTemplate("Post three walkthroughs", "Share short walkthroughs that link to the listing."),
            ActionTemplate("Bundle and upsell", "Bundle the best sellers and add a premium tier."),
        ),
        leverage_points=(
            "Every template is a lead magnet for the next one.",
            "Marketplaces add free distribution.",
        ),
        reinvestment="Spend template income on a small paid promotion for the best-selling bundle.",
        keywords=("design", "notion", "figma", "template", "spreadsheet", "excel"),
        asset_affinities=frozenset({Asset.DESIGN_PORTFOLIO, Asset.AUDIENCE, Asset.NEWSLETTER}),
        metric=MetricTemplate(
            focus=MetricFocus.REACH,
            label="Listing visitors",
            target="Reach {units} monthly listing visitors",
            why="Template sales track traffic closely; more eyes on the listing is the main lever.",
            unit_value=0.5,
        ),
    ),
    StrategyTemplate(
        id="cohort-course",
        title="Cohort-based course",
        description="Teach a live, time-boxed cohort that gets students to one concrete result.",
        rationale="People pay a premium to learn {skill} with accountability, and {asset} fills the first cohort.",
        preferences=frozenset({Preference.CONTENT, Preference.PRODUCT}),
        risk_bands=frozenset({RiskTolerance.MEDIUM}),
        min_capital=0,
        max_capital=5_000,
        reference_capital=800,
        min_hours=8,
        reference_hours=15,
        base_startup_cost=400,
        min_startup_cost=40,
        base_monthly_revenue=5_000,
        base_timeline_weeks=8,
        actions=(
            ActionTemplate("Validate the promise", "Pre-sell ten seats with a one-paragraph outcome promise."),
            ActionTemplate("Outline the curriculum", "Plan four weekly sessions, each ending in a deliverable."),
            ActionTemplate("Run the pilot cohort", "Teach live, record everything and collect testimonials."),
            ActionTemplate("Open the next cohort", "Relaunch with testimonials and a higher price."),
        ),
        leverage_points=(
            "Recordings become an evergreen product.",
            "Alumni become affiliates.",
        ),
        reinvestment="Use cohort revenue to fund a teaching assistant and double the cohort size.",
        keywords=("teach", "coach", "writing", "video", "training", "speaking"),
        asset_affinities=frozenset({Asset.AUDIENCE, Asset.NEWSLETTER, Asset.CONSULTING_CASE_STUDIES}),
        metric=MetricTemplate(
            focus=MetricFocus.REACH,
            label="Waitlist size",
            target="Grow the waitlist to {units} people before each cohort",
            why="A cohort sells out from its waitlist; the list size caps the launch.",
            unit_value=25,
        ),
    ),
    StrategyTemplate(
        id="niche-micro-saas",
        title="Niche micro-SaaS",
        description="Build a focused software tool for one narrow audience and charge a monthly subscription.",
        rationale="Recurring revenue compounds, and {skill} plus {asset} shortens the path to a paid beta.",
        preferences=frozenset({Preference.SAAS, Preference.PRODUCT}),
        risk_bands=frozenset({RiskTolerance.MEDIUM, RiskTolerance.HIGH}),
        min_capital=200,
        max_capital=25_000,
        reference_capital=3_000,
        min_hours=12,
        reference_hours=25,
        base_startup_cost=1_500,
        min_startup_cost=100,
        base_monthly_revenue=7_000,
        base_timeline_weeks=12,
        actions=(
            ActionTemplate("Interview ten buyers", "Confirm one painful workflow and what they pay to solve it today."),
            ActionTemplate("Ship a paid beta", "Release the smallest useful version to paying design partners."),
            ActionTemplate("Instrument activation", "Track the first-value moment and fix the biggest drop-off."),
            ActionTemplate("Open self-serve", "Add self-serve checkout and a public changelog."),
        ),
        leverage_points=(
            "Annual plans pull cash forward.",
            "Integrations become distribution.",
        ),
        reinvestment="Put subscription revenue into the integration that your best customers request most.",
        keywords=("developer", "python", "javascript", "code", "engineering", "software", "product"),
        asset_affinities=frozenset({Asset.CODEBASE, Asset.AUTOMATION_TOOLS, Asset.CAPITAL_ACCESS}),
        metric=MetricTemplate(
            focus=MetricFocus.RETENTION,
            label="Paying subscribers",
            target="Reach {units} paying subscribers with monthly churn under 5%",
            why="Subscribers who stay are the whole SaaS business; churn erases growth silently.",
            unit_value=49,
        ),
    ),
    StrategyTemplate(
        id="white-label-saas-reseller",
        title="White-label SaaS reseller",
        description="Resell an existing white-label platform under your own brand to a niche you know.",
        rationale="You skip building software and sell on {skill}; {asset} carries the first demos.",
        preferences=frozenset({Preference.SAAS}),
        risk_bands=frozenset({RiskTolerance.LOW, RiskTolerance.MEDIUM}),
        min_capital=0,
        max_capital=5_000,
        reference_capital=800,
        min_hours=6,
        reference_hours=12,
        base_startup_cost=300,
        min_startup_cost=30,
        base_monthly_revenue=2_500,
        base_timeline_weeks=4,
        actions=(
            ActionTemplate("Choose the platform", "Pick a white-label platform with healthy margins and a trial."),
            ActionTemplate("Brand the offer", "Set up your branded instance with niche-specific onboarding."),
            ActionTemplate("Run ten demos", "Demo to ten businesses in the niche and close pilots."),
            ActionTemplate("Add setup fees", "Charge a one-time setup fee on top of the subscription."),
        ),
        leverage_points=(
            "Setup fees fund acquisition.",
            "Niche onboarding beats generic competitors.",
        ),
        reinvestment="Turn setup fees into niche onboarding content that lowers the cost of each new account.",
        keywords=("sales", "marketing", "crm", "agency", "account"),
        asset_affinities=frozenset({Asset.SALES_SCRIPTS, Asset.CONSULTING_CASE_STUDIES, Asset.AUTOMATION_TOOLS}),
        metric=MetricTemplate(
            focus=MetricFocus.RETENTION,
            label="Active accounts",
            target="Keep {units} active accounts with 90% month-two retention",
            why="Reseller margin only pays off when accounts stay past the setup month.",
            unit_value=150,
        ),
    ),
    StrategyTemplate(
        id="acquire-online-business",
        title="Acquire a small online business",
        description="Buy a small profitable online business and grow it with automation and better operations.",
        rationale="Buying existing cash flow skips the zero-to-one phase; {asset} and {skill} fund and run the improvements.",
        preferences=frozenset({Preference.SAAS, Preference.PRODUCT, Preference.AUTOMATION}),
        risk_bands=frozenset({RiskTolerance.HIGH}),
        min_capital=5_000,
        max_capital=100_000,
        reference_capital=25_000,
        min_hours=10,
        reference_hours=20,
        base_startup_cost=15_000,
        min_startup_cost=2_000,
        base_monthly_revenue=12_000,
        base_timeline_weeks=12,
        actions=(
            ActionTemplate("Set buy criteria", "Define price range, niche and minimum trailing profit."),
            ActionTemplate("Screen listings", "Review 20 listings on marketplaces and request data for the top five."),
            ActionTemplate("Run diligence", "Verify revenue, traffic and churn before signing a letter of intent."),
            ActionTemplate("Automate operations", "Automate support and fulfilment in the first 30 days after close."),
        ),
        leverage_points=(
            "Existing revenue de-risks the first months.",
            "Operational fixes raise the resale multiple.",
        ),
        reinvestment="Reinvest acquired cash flow into the next acquisition once the first one runs without you.",
        keywords=("finance", "acquisition", "operations", "growth", "investing", "m&a"),
        asset_affinities=frozenset({Asset.CAPITAL_ACCESS, Asset.AUTOMATION_TOOLS, Asset.CODEBASE}),
        metric=MetricTemplate(
            focus=MetricFocus.EFFICIENCY,
            label="Owner hours per week",
            target="Cut owner time to under 10 hours a week within {weeks} weeks of close",
            why="A business that runs without you is both more profitable and worth more when sold.",
        ),
        weights=ScoreWeights(assets=20.0),
    ),
    StrategyTemplate(
        id="sponsored-newsletter",
        title="Sponsored newsletter",
        description="Publish a focused newsletter and sell sponsorship slots once the list is engaged.",
        rationale="A niche list written around {skill} attracts sponsors, and {asset} gives you a head start.",
        preferences=frozenset({Preference.CONTENT}),
        risk_bands=frozenset({RiskTolerance.LOW, RiskTolerance.MEDIUM}),
        min_capital=0,
        max_capital=2_000,
        reference_capital=250,
        min_hours=4,
        reference_hours=10,
        base_startup_cost=100,
        min_startup_cost=10,
        base_monthly_revenue=1_800,
        base_timeline_weeks=6,
        actions=(
            ActionTemplate("Define the niche", "Pick a reader profile sponsors want to reach."),
            ActionTemplate("Publish weekly", "Ship one issue a week with a consistent format."),
            ActionTemplate("Add referral growth", "Launch a referral program with simple rewards."),
            ActionTemplate("Sell the first slot", "Pitch five relevant sponsors with a one-page media kit."),
        ),
        leverage_points=(
            "The list is an owned channel for every future offer.",
            "Sponsor demand grows with niche focus, not size alone.",
        ),
        reinvestment="Spend sponsorship income on paid subscriber acquisition while cost per subscriber stays below revenue per subscriber.",
        keywords=("writing", "copy", "newsletter", "journalism", "research", "editing"),
        asset_affinities=frozenset({Asset.NEWSLETTER, Asset.AUDIENCE}),
        metric=MetricTemplate(
            focus=MetricFocus.REACH,
            label="Engaged subscribers",
            target="Grow to {units} subscribers with open rates above 40%",
            why="Sponsors buy engaged attention, so list growth and opens set your rate card.",
            unit_value=0.75,
        ),
    ),
    StrategyTemplate(
        id="short-form-content-studio",
        title="Short-form content studio",
        description="Produce short-form video for brands and grow your own channel as the studio's portfolio.",
        rationale="Brands pay for attention they cannot make themselves; {skill} and {asset} prove you can.",
        preferences=frozenset({Preference.CONTENT, Preference.SERVICE}),
        risk_bands=frozenset({RiskTolerance.HIGH}),
        min_capital=500,
        max_capital=15_000,
        reference_capital=4_000,
        min_hours=15,
        reference_hours=25,
        base_startup_cost=2_000,
        min_startup_cost=150,
        base_monthly_revenue=8_000,
        base_timeline_weeks=10,
        actions=(
            ActionTemplate("Build the reel", "Produce ten sample videos in one niche to prove the format."),
            ActionTemplate("Grow the studio channel", "Post daily on the studio account to show reach."),
            ActionTemplate("Pitch brand packages", "Offer monthly video packages to brands in the niche."),
            ActionTemplate("Hire an editor", "Bring on an editor and systemise the production pipeline."),
        ),
        leverage_points=(
            "Your own channel is the studio's portfolio.",
            "Monthly packages beat one-off gigs.",
        ),
        reinvestment="Roll studio revenue into a second editor and better gear to lift output without more of your time.",
        keywords=("video", "editing", "social", "content", "creator", "tiktok"),
        asset_affinities=frozenset({Asset.AUDIENCE, Asset.DESIGN_PORTFOLIO, Asset.CAPITAL_ACCESS}),
        metric=MetricTemplate(
            focus=MetricFocus.REACH,
            label="Monthly views",
            target="Reach {units} monthly views across studio and client channels",
            why="Views are the studio's proof of work and the number brands ask for first.",
            unit_value=0.02,
        ),
    ),
)

_TEMPLATES_BY_ID: Dict[str, StrategyTemplate] = {template.id: template for template in STRATEGY_CATALOG}


def get_template(template_id: str) -> StrategyTemplate:
    """Return the catalog template with the given id."""

    return _TEMPLATES_BY_ID[template_id]


def validate_catalog(catalog: Tuple[StrategyTemplate, ...] = STRATEGY_CATALOG) -> None:
    """Check the catalog invariants the engine relies on.

    Every preference must be reachable in every risk band, otherwise a
    profile could end up with no aligned strategy at all.
    """

    seen: set[str] = set()
    for template in catalog:
        if template.id in seen:
            raise CatalogError(f"Duplicate strategy template id '{template.id}'.")
        seen.add(template.id)

        if not template.actions:
            raise CatalogError(f"Template '{template.id}' has no action steps.")
        if not template.preferences or not template.risk_bands:
            raise CatalogError(f"Template '{template.id}' has no preference or risk band.")
        if not 0 <= template.min_capital <= template.max_capital:
            raise CatalogError(f"Template '{template.id}' has an inverted capital band.")
        if template.reference_capital <= 0 or template.reference_hours <= 0:
            raise CatalogError(f"Template '{template.id}' needs positive reference capital and hours.")
        if template.min_hours > template.reference_hours:
            raise CatalogError(f"Template '{template.id}' requires more hours than its reference point.")
        if not 0 < template.min_startup_cost <= template.base_startup_cost:
            raise CatalogError(f"Template '{template.id}' has an invalid startup cost floor.")
        if template.base_timeline_weeks <= 0 or template.base_monthly_revenue <= 0:
            raise CatalogError(f"Template '{template.id}' needs a positive timeline and revenue.")

    for preference in Preference:
        for band in RiskTolerance:
            if not any(
                preference in template.preferences and band in template.risk_bands for template in catalog
            ):
                raise CatalogError(
                    f"No strategy template covers preference '{preference.value}' at {band.value} risk."
                )
