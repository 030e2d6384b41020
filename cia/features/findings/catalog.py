"""Standard-depth assessment findings, one per canonical category.

Raw payloads; `FindingRepository` validates them before anything reads them.
"""

from typing import Any

STANDARD_FINDINGS: tuple[dict[str, Any], ...] = (
    {
        "category": "wai",
        "issue": "Potential degradation of mauri and clarity in tributary due to earthworks sediment discharges",
        "effects": {
            "cultural": [
                "Mauri of the awa diminished; disruption to mahinga kai practices",
                "Reduced ability for whānau to gather kai safely",
            ],
            "social": ["Community concern over river health; trust impacts"],
            "environmental": ["Elevated NTU and TSS; smothering of habitat; fish passage stress"],
            "spiritual": ["Tapu/noa balance affected where discharges occur near wāhi tapu"],
        },
        "mitigations": [
            "Install staged sediment retention ponds sized to Hamilton District Plan GD05 guidance; monitor turbidity (NTU) daily.",
            "No instream works during tuna migration periods; implement 25 m riparian buffer in sensitive reaches.",
        ],
        "recommendations": [
            "Co-design mahinga kai monitoring with mana whenua; quarterly wānanga to review data and adaptive actions.",
            "Embed Te Ture Whaimana vision-objectives as assessment criteria in contractor EMS (Environmental Management System).",
        ],
        "triggers": {
            "metrics": [
                "NTU (turbidity)",
                "TSS (mg/L)",
                "E. coli (cfu/100 mL)",
                "Visual clarity (m)",
                "Mahinga kai presence/abundance (tuna/īnanga)",
            ],
            "baselines": "Establish 4-week pre-works baseline for NTU/clarity and cultural health index (CHI) with mana whenua.",
            "thresholds": [
                "NTU > baseline + 25% for >24h",
                "Clarity < 1.6 m during fine weather",
                "Any exceedance at mahinga kai sites",
            ],
            "actions": [
                "Stop high-risk works; inspect ESCP; deploy additional treatment within 24h",
                "Notify mana whenua and Council within 1 working day",
                "Hold hui within 5 working days to agree corrective actions",
            ],
            "reporting": "Quarterly report + dashboard; immediate incident reports when thresholds tripped.",
        },
        "policy_links": [
            "Te Ture Whaimana - Vision and Objective 1 (health and wellbeing of the Waikato River)",
            "Tai Tumu, Tai Pari, Tai Ao EMP - Wai: water quality, mahinga kai protection",
            "Hamilton District Plan - 25.14 Infrastructure; erosion/sediment control standards",
        ],
        "consent_clauses": [
            "Prior to works, the consent holder must submit an Erosion and Sediment Control Plan (ESCP) prepared by a suitably qualified person, demonstrating compliance with GD05 and avoiding instream works during identified migration windows for tuna/īnanga.",
            "Establish a Mauri Monitoring Programme co-developed with mana whenua that sets baseline and trigger levels (including NTU and clarity), provides for mahinga kai assessments, and requires adaptive responses within 10 working days if triggers are exceeded.",
        ],
    },
    {
        "category": "whenua",
        "issue": "Loss of topsoil and disturbance of known urupā risk area within 200 m of works",
        "effects": {
            "cultural": ["Risk to wāhi tapu/wāhi tūpuna; mamae if disturbance occurs"],
            "social": ["Project delays and conflict if discovery process unclear"],
            "environmental": ["Erosion risk; reduced soil productivity if not salvaged"],
            "spiritual": ["Tapu breach potential requiring tikanga responses"],
        },
        "mitigations": [
            "Cultural discovery protocol with immediate stop-work and notification process.",
            "Topsoil salvage and reuse plan to support revegetation with taonga species.",
        ],
        "recommendations": [
            "Archaeological Authority (HNZPT) pre-works; mana whenua monitors present during initial ground-breaking.",
            "GIS mapping layer for wāhi tapu/wāhi tūpuna integrated into contractor inductions.",
        ],
        "triggers": {
            "metrics": ["Protocol drills completed", "Monitor hours on-site", "Incidents recorded"],
            "baselines": "Zero harm baseline (no unauthorised ground disturbance).",
            "thresholds": ["Any suspected kōiwi or taonga triggers stop-work"],
            "actions": [
                "Immediate stop-work; protect area; notify mana whenua, HNZPT, Police (if kōiwi)",
                "Undertake tikanga-led process; update methodology before resuming",
            ],
            "reporting": "Incident log shared within 24h; monthly summary including training and inductions.",
        },
        "policy_links": [
            "Tai Tumu, Tai Pari, Tai Ao EMP - Whenua: protection of wāhi tapu, soils, and landscapes",
            "Hamilton/Waikato District Plan - Heritage and Archaeology provisions",
        ],
        "consent_clauses": [
            "Implement a Cultural Discovery Protocol approved by mana whenua prior to commencement; all staff to be inducted and protocol kept onsite at all times.",
            "Require mana whenua cultural monitors to be present during initial stripping; consent holder to fund participation and reporting.",
        ],
    },
    {
        "category": "whakapapa",
        "issue": "Fragmentation of ecological corridors reducing connectivity for taonga species",
        "effects": {
            "cultural": ["Disruption to whakapapa relationships among species and habitats"],
            "social": ["Loss of local amenity and learning opportunities for rangatahi"],
            "environmental": ["Barrier to fish passage; edge effects increase predators/weeds"],
            "spiritual": ["Diminished wairua of place if connections severed"],
        },
        "mitigations": [
            "Design wildlife-friendly culverts and fish passage; stage works to maintain connectivity.",
        ],
        "recommendations": [
            "Planting palette guided by whakapapa of place (locally-sourced eco-sourced taonga species); 3-year establishment and pest control.",
        ],
        "triggers": {
            "metrics": ["Fish passage scores (NIWA tool)", "Survival of plantings (%)", "Predator trap-catch"],
            "baselines": "Pre-works fish passage survey and habitat mapping.",
            "thresholds": ["Fish passage score < baseline", "Plant survival <85%"],
            "actions": ["Remediate culverts; replace failed plantings; intensify pest control"],
            "reporting": "Six-monthly ecological report + wānanga walkthrough.",
        },
        "policy_links": [
            "Te Ture Whaimana - enhancement of ecological integrity",
            "Tai Tumu, Tai Pari, Tai Ao EMP - Whakapapa: intergenerational stewardship",
        ],
        "consent_clauses": [
            "Fish passage to meet NIWA fish passage assessment tool thresholds; as-built certification prior to operation.",
        ],
    },
    {
        "category": "whānau",
        "issue": "Construction traffic and noise affecting marae access, tangihanga, and daily whānau life",
        "effects": {
            "cultural": ["Disruption to marae protocols and ability to host kaupapa including tangihanga"],
            "social": ["Increased stress; reduced community cohesion if engagement is weak"],
            "environmental": ["Dust and vibration affecting nearby sensitive receivers"],
            "spiritual": ["Disturbance to wairua during significant whānau events"],
        },
        "mitigations": [
            "Traffic Management Plan (TMP) with marae input; avoid peak event times",
            "Construction Noise and Vibration Management Plan; onsite dust suppression",
        ],
        "recommendations": [
            "Co-design communications plan with mana whenua; 2-week lookahead notices",
            "Identify protected access windows around known marae events/tangihanga",
        ],
        "triggers": {
            "metrics": ["LAeq dB", "Number of complaints", "Access block incidents"],
            "baselines": "Pre-works ambient noise survey and access mapping with whānau.",
            "thresholds": [">2 substantiated access incidents/month", "Noise exceeds plan limits"],
            "actions": [
                "Adjust work hours/routing; deploy additional acoustic barriers",
                "Hūtu wānanga within 5 working days to agree changes",
            ],
            "reporting": "Monthly community report; real-time hotline with log shared to mana whenua.",
        },
        "policy_links": [
            "Tai Tumu, Tai Pari, Tai Ao EMP - Whānau and participation",
            "Applicable District Plan - Noise/traffic rules and engagement requirements",
        ],
        "consent_clauses": [
            "Prepare and implement a TMP and Communications Plan co-designed with mana whenua, including protected access windows for marae and mechanisms for event-time pauses.",
            "Maintain a dedicated contact line and incident log accessible to mana whenua; implement corrective actions within 5 working days.",
        ],
    },
    {
        "category": "mauri",
        "issue": "Residual effects risk during storm events despite controls",
        "effects": {
            "cultural": ["Perceived degradation of mauri during heavy rain events"],
            "social": ["Community anxiety following spill/overflow rumours"],
            "environmental": ["Pulse loads of sediments and contaminants"],
            "spiritual": ["Loss of balance (tapu/noa) when incidents occur"],
        },
        "mitigations": [
            "Adaptive management triggers linked to rainfall intensity thresholds",
            "Contingency spill kits and overflow prevention measures",
        ],
        "recommendations": [
            "Integrate mauri indicators in dashboard with traffic-light triggers",
            "Run post-event wānanga to agree remediation and learning",
        ],
        "triggers": {
            "metrics": ["Rainfall (mm/hr)", "NTU spikes", "Incident count"],
            "baselines": "Event-based baseline using first-flush data",
            "thresholds": [">20 mm/hr with NTU > baseline + 40%", "Any overflow"],
            "actions": ["Suspend exposed works; stand-up response team; notify within 24h"],
            "reporting": "Event summary within 5 days; quarterly trend analysis with mana whenua.",
        },
        "policy_links": [
            "Te Ture Whaimana - maintaining and enhancing the mauri of the Waikato River",
            "Tai Tumu, Tai Pari, Tai Ao EMP - Mauri",
        ],
        "consent_clauses": [
            "Adopt an Adaptive Management Plan with rainfall-linked triggers and defined corrective actions; co-develop with mana whenua and submit prior to works.",
        ],
    },
    {
        "category": "wairua",
        "issue": "Loss of sense of place at wāhi tūpuna vista and culturally sensitive viewshafts",
        "effects": {
            "cultural": ["Erosion of identity where viewshafts are compromised"],
            "social": ["Reduced pride and connection to place"],
            "environmental": ["Visual amenity effects; vegetation structure changes"],
            "spiritual": ["Disruption to wairua associated with the site"],
        },
        "mitigations": [
            "Cultural design review panel with mana whenua; protect key sightlines",
        ],
        "recommendations": [
            "Develop a viewshaft protection plan and culturally anchored design palette",
        ],
        "triggers": {
            "metrics": ["Design gate approvals", "Non-conformance count"],
            "baselines": "Pre-works photo-simulations agreed with mana whenua",
            "thresholds": ["Any deviation from agreed sightline envelope"],
            "actions": ["Iterate design to restore sightlines; additional planting/screening"],
            "reporting": "Design review minutes; pre/post photo-comparisons filed with CIA updates.",
        },
        "policy_links": [
            "Tai Tumu, Tai Pari, Tai Ao EMP - Wairua and landscapes",
            "District Plan - Landscape/amenity objectives and policies",
        ],
        "consent_clauses": [
            "Establish a Cultural Design Review Panel with decision checkpoints at concept, developed, and pre-construction stages; implement agreed viewshaft protection measures.",
        ],
    },
)

# Standing clause appended to the consent-condition library shown with the summary.
EMS_ALIGNMENT_CLAUSE = (
    "Contractor EMS must include Te Ture Whaimana alignment statement and training "
    "module co-designed with mana whenua."
)
