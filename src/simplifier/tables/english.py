"""
src/simplifier/tables/english.py
=================================
English Lookup Tables — Vaani Simplifier

Contents:
    - SIMPLIFICATIONS   complex word / phrase → plain word
    - ABBREVIATIONS     abbreviation → spelled-out form
    - PHRASE_RULES      ordered multi-word filler rewrites
    - REDUNDANT_PHRASES filler phrases stripped after segmentation

All tables are read-only mappings built once at import.
Keys are matched case-insensitively as whole words.
"""

from types import MappingProxyType


# ---------------------------------------------------------------------------
# Complex → simple vocabulary
# ---------------------------------------------------------------------------

_SIMPLIFICATIONS: dict[str, str] = {
    # Verbs
    "utilize": "use",
    "utilise": "use",
    "purchase": "buy",
    "commence": "start",
    "terminate": "end",
    "demonstrate": "show",
    "implement": "do",
    "facilitate": "help",
    "accomplish": "do",
    "determine": "find",
    "establish": "make",
    "maintain": "keep",
    "possess": "have",
    "construct": "build",
    "eliminate": "remove",
    "initiate": "start",
    "conclude": "end",
    "modify": "change",
    "receive": "get",
    "acquire": "get",
    "require": "need",
    "attempt": "try",
    "endeavor": "try",
    "endeavour": "try",
    "assist": "help",
    "provide": "give",
    "obtain": "get",
    "participate": "join",
    "investigate": "check",
    "examine": "check",
    "observe": "watch",
    "continue": "keep",
    "proceed": "go",
    "inform": "tell",
    "notify": "tell",
    "communicate": "talk",
    "discuss": "talk about",
    "consider": "think about",
    "comprehend": "understand",
    "realize": "see",
    "recognize": "know",
    "recommend": "suggest",
    "request": "ask",
    "inquire": "ask",
    "enquire": "ask",
    "respond": "answer",
    "reply": "answer",
    "describe": "tell about",
    "explain": "tell",
    "clarify": "make clear",
    "specify": "say exactly",
    "indicate": "show",
    "illustrate": "show",
    "display": "show",
    "reveal": "show",
    "conceal": "hide",
    "protect": "keep safe",
    "prevent": "stop",
    "permit": "allow",
    "prohibit": "not allow",
    "restrict": "limit",
    "reduce": "make less",
    "increase": "make more",
    "enhance": "make better",
    "improve": "make better",
    "develop": "grow",
    "create": "make",
    "produce": "make",
    "generate": "make",
    "operate": "work",
    "perform": "do",
    "execute": "do",
    "complete": "finish",
    "finalize": "finish",
    "achieve": "reach",
    "attain": "reach",
    "contain": "have",
    "include": "have",
    "comprise": "have",
    "remain": "stay",
    "reside": "live",
    "inhabit": "live in",
    "transport": "carry",
    "transfer": "move",
    "relocate": "move",
    "navigate": "go",
    "depart": "leave",
    "arrive": "come",
    "appear": "show up",
    "disappear": "go away",
    "anticipate": "expect",
    "ascertain": "find out",
    "endorse": "support",
    "expedite": "speed up",
    "disseminate": "share",
    "allocate": "give",
    "consume": "eat",
    "converse": "talk",
    "perceive": "see",
    "verify": "check",
    "validate": "check",
    "evaluate": "judge",
    "estimate": "guess",
    # Adjectives & adverbs
    "approximately": "about",
    "sufficient": "enough",
    "additional": "more",
    "numerous": "many",
    "multiple": "many",
    "various": "many",
    "particular": "special",
    "specific": "exact",
    "accurate": "right",
    "appropriate": "right",
    "suitable": "good",
    "adequate": "good enough",
    "excellent": "very good",
    "exceptional": "very good",
    "outstanding": "very good",
    "superior": "better",
    "inferior": "worse",
    "difficult": "hard",
    "challenging": "hard",
    "complex": "hard",
    "complicated": "hard",
    "simple": "easy",
    "elementary": "simple",
    "fundamental": "basic",
    "essential": "needed",
    "necessary": "needed",
    "mandatory": "must do",
    "optional": "can choose",
    "important": "big",
    "significant": "big",
    "substantial": "big",
    "considerable": "big",
    "major": "big",
    "minor": "small",
    "minimal": "very small",
    "enormous": "very big",
    "massive": "very big",
    "rapid": "fast",
    "swift": "fast",
    "gradual": "slow",
    "immediate": "now",
    "instant": "right now",
    "delayed": "late",
    "recent": "new",
    "current": "now",
    "contemporary": "modern",
    "ancient": "very old",
    "modern": "new",
    "conventional": "usual",
    "typical": "usual",
    "ordinary": "usual",
    "unusual": "rare",
    "unique": "one of a kind",
    "universal": "for all",
    "distant": "far",
    "remote": "far away",
    "adjacent": "next to",
    "similar": "alike",
    "different": "not same",
    "identical": "exactly same",
    "equivalent": "same",
    "diverse": "different",
    "visible": "can see",
    "invisible": "cannot see",
    "audible": "can hear",
    "inaudible": "cannot hear",
    "temporary": "for now",
    "permanent": "stays",
    "lengthy": "long",
    "concise": "short",
    "extensive": "long",
    "previously": "before",
    "subsequently": "after",
    "regarding": "about",
    "concerning": "about",
    "therefore": "so",
    "thus": "so",
    "hence": "so",
    "consequently": "so",
    "accordingly": "so",
    "however": "but",
    "nevertheless": "but",
    "nonetheless": "but",
    "although": "but",
    "despite": "even with",
    "furthermore": "also",
    "moreover": "also",
    "additionally": "also",
    "likewise": "also",
    "similarly": "in same way",
    "conversely": "on other hand",
    "alternatively": "or",
    "otherwise": "if not",
    "meanwhile": "at same time",
    "simultaneously": "at same time",
    "eventually": "finally",
    "ultimately": "in the end",
    "initially": "at first",
    "originally": "at first",
    "primarily": "mainly",
    "chiefly": "mostly",
    "particularly": "especially",
    "specifically": "exactly",
    "generally": "usually",
    "typically": "usually",
    "frequently": "often",
    "occasionally": "sometimes",
    "rarely": "not often",
    "seldom": "not often",
    # Nouns
    "assistance": "help",
    "information": "info",
    "documentation": "papers",
    "notification": "message",
    "communication": "talk",
    "conversation": "talk",
    "discussion": "talk",
    "explanation": "reason",
    "instruction": "steps",
    "location": "place",
    "situation": "what happens",
    "circumstance": "situation",
    "environment": "surroundings",
    "quantity": "amount",
    "percentage": "part of 100",
    "component": "part",
    "characteristic": "trait",
    "advantage": "good point",
    "disadvantage": "bad point",
    "benefit": "good thing",
    "drawback": "problem",
    "difficulty": "problem",
    "obstacle": "block",
    "barrier": "block",
    "solution": "answer",
    "resolution": "fix",
    "method": "way",
    "technique": "way",
    "approach": "way",
    "procedure": "steps",
    "mechanism": "how it works",
    "objective": "goal",
    "intention": "plan",
    "strategy": "plan",
    "regulation": "rule",
    "requirement": "what is needed",
    "prerequisite": "what is needed first",
    "necessity": "need",
    "alternative": "other choice",
    "possibility": "maybe",
    "opportunity": "chance",
    "occasion": "time",
    "duration": "how long",
    "sequence": "order",
    "category": "type",
    "classification": "type",
    "magnitude": "size",
    "dimension": "size",
    "relationship": "connection",
    "consequence": "result",
    "outcome": "result",
    "perspective": "view",
    "viewpoint": "view",
    "emotion": "feeling",
    "experience": "what happened",
    "occurrence": "event",
    "incident": "event",
    "achievement": "success",
    "accomplishment": "success",
    "improvement": "getting better",
    "advancement": "moving forward",
    "reduction": "less",
    "limitation": "limit",
    "restriction": "limit",
    "permission": "okay",
    "authorization": "okay",
    "approval": "yes",
    "confirmation": "yes",
    "verification": "check",
    "inspection": "check",
    "investigation": "checking",
    "evaluation": "judging",
    "measurement": "measuring",
    "calculation": "math",
    "estimation": "guess",
    "prediction": "guess",
    "expectation": "hope",
    "hypothesis": "idea",
    "concept": "idea",
    "notion": "idea",
    "comprehension": "understanding",
    "interpretation": "meaning",
    "significance": "importance",
    "expense": "cost",
    "transaction": "deal",
    "transportation": "moving",
    "vehicle": "car",
    "equipment": "tools",
    "apparatus": "device",
    "facility": "place",
    "residence": "home",
    "dwelling": "home",
    "physician": "doctor",
    "medication": "medicine",
    "beverage": "drink",
    "nourishment": "food",
    "corporation": "company",
    "enterprise": "business",
    "occupation": "job",
    "profession": "job",
    "employment": "job",
    "responsibility": "duty",
    "obligation": "must do",
    "assignment": "work",
    "initiative": "new plan",
}

SIMPLIFICATIONS = MappingProxyType(_SIMPLIFICATIONS)


# ---------------------------------------------------------------------------
# Abbreviation expansion (English only)
# ---------------------------------------------------------------------------

ABBREVIATIONS = MappingProxyType({
    "etc": "and so on",
    "e.g.": "for example",
    "i.e.": "that is",
    "vs": "versus",
    "aka": "also known as",
    "asap": "as soon as possible",
    "fyi": "for your information",
    "btw": "by the way",
    "imo": "in my opinion",
    "tbh": "to be honest",
    "idk": "I do not know",
    "omg": "oh my god",
    "approx": "about",
    "govt": "government",
    "dept": "department",
})


# ---------------------------------------------------------------------------
# Phrase-level rewrites, applied in order, case-insensitive
# ---------------------------------------------------------------------------

PHRASE_RULES: tuple[tuple[str, str], ...] = (
    (r"\bin order to\b", "to"),
    (r"\bdue to the fact that\b", "because"),
    (r"\bowing to the fact that\b", "because"),
    (r"\bin spite of the fact that\b", "even though"),
    (r"\bat this point in time\b", "now"),
    (r"\bat the present time\b", "now"),
    (r"\bat the current time\b", "now"),
    # "important" is already "big" by the time phrase rules run
    (r"\bit is (?:important|big) to note that\b", "note that"),
    (r"\bas a matter of fact\b", "in fact"),
    (r"\bfor the purpose of\b", "for"),
    (r"\bwith regard to\b", "about"),
    (r"\bwith respect to\b", "about"),
    (r"\bin regard to\b", "about"),
    (r"\ba large number of\b", "many"),
    (r"\ba great deal of\b", "much"),
    (r"\ba lot of\b", "many"),
    (r"\bis able to\b", "can"),
    (r"\bhas the ability to\b", "can"),
    (r"\bin the event that\b", "if"),
    (r"\bin the near future\b", "soon"),
    (r"\bat the conclusion of\b", "at the end"),
    (r"\bprior to\b", "before"),
    (r"\bsubsequent to\b", "after"),
)


# ---------------------------------------------------------------------------
# Redundant filler, stripped after sentence segmentation
# ---------------------------------------------------------------------------

REDUNDANT_PHRASES: tuple[str, ...] = (
    r"\bin my opinion\b",
    r"\bI think that\b",
    r"\bI believe that\b",
    r"\bit seems that\b",
    r"\bbasically\b",
    r"\bliterally\b",
    r"\bactually\b",
)

# Collapsed rather than stripped
REDUNDANT_REPEATS: tuple[tuple[str, str], ...] = (
    (r"\bvery very\b", "very"),
    (r"\breally really\b", "really"),
)
