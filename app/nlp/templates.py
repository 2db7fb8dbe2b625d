"""
nlp/templates.py — Named question templates.

Some questions come up in every recruiter conversation ("walk me through
your resume", "why should we hire you"). Each one gets a named rule here and
a hand-written answer in responder/answers.py.

Rules run in order against the RAW question (not the normalized one:
synonym expansion would make the broader rules fire on everything).
A rule matches when all of its regexes match. First match wins.
"""
import re
from dataclasses import dataclass

from app.observability.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TemplateRule:
    name: str
    patterns: tuple[re.Pattern, ...]

    def matches(self, question: str) -> bool:
        return all(p.search(question) for p in self.patterns)


def _rule(name: str, *patterns: str) -> TemplateRule:
    return TemplateRule(name, tuple(re.compile(p, re.IGNORECASE) for p in patterns))


TEMPLATE_RULES: tuple[TemplateRule, ...] = (
    # Resume & background
    _rule("resume_overview", r"walk (me )?through (your )?resume|tell me about yourself|your background"),

    # Education
    _rule("education_motivation", r"why.*pursue.*bachelor.*master|motivated.*degree"),
    _rule("why_university", r"why.*red river|why.*\brrsu\b"),
    _rule("why_mis", r"why.*management information"),
    _rule("business_tech_integration", r"integrate.*business.*technical|combine.*business.*tech"),

    # Digital transformation & direction
    _rule("digital_transformation", r"define.*digital transformation|what.*digital transformation"),
    _rule("passion_origin", r"what sparked.*passion|why.*passionate"),
    _rule("career_vision", r"long[- ]?term.*vision|career.*vision|future.*career"),
    _rule("most_impactful", r"which.*shaped.*most|most important.*experience"),

    # Specific roles
    _rule("northwind_role", r"northwind|pega.*intern", r"what.*do|role|contribute"),
    _rule("soundwave_insights", r"soundwave|consumer.*insight"),
    _rule("prairie_analytics", r"prairie", r"21%|latency|reporting"),
    _rule("teaching_role", r"graduate assistant|teaching.*sql"),
    _rule("retail_experience", r"corner market|retail.*management"),

    # Projects
    _rule("avatar_inspiration", r"(avatar.*portfolio|3d.*portfolio).*inspired|why.*\b3d\b"),
    _rule("pomopal_purpose", r"pomopal.*(problem|solve)"),
    _rule("hearth_privacy", r"hearth.*privacy|why.*privacy"),
    _rule("linkedin_motivation", r"linkedin.*assistant.*inspired|why.*chrome"),

    # Technical depth
    _rule("cloud_preference", r"prefer.*cloud|which.*cloud.*platform"),
    _rule("sql_proficiency", r"sql.*join|window function|\bcte\b"),
    _rule("debugging_approach", r"debug.*python|debugging.*process"),
    _rule("ai_library_preference", r"langchain.*hugging.*face|prefer.*ai.*librar"),
    _rule("automation_tools", r"uipath|\brpa\b|automation tool"),
    _rule("data_visualization", r"tableau|power bi|dashboard"),

    # Leadership
    _rule("leadership_club", r"presidents? leadership club|events.*chair"),
    _rule("time_management", r"balance.*academic.*project|manage.*time"),
    _rule("team_motivation", r"motivate.*team|team.*motivation"),
    _rule("handling_conflict", r"conflict|disagree"),

    # Values and fit
    _rule("work_culture", r"work.*culture|culture.*motivate"),
    _rule("handling_failure", r"handle.*failure|deal.*criticism"),
    _rule("why_hire", r"why.*hire.*you|why.*should.*we"),
    _rule("greatest_strength", r"(greatest|biggest) strength|strongest (skill|trait)"),
    _rule("weakness", r"weakness"),
    _rule("learning_from_mistakes", r"mistake.*grew|learned.*from"),
    _rule("tech_ethics", r"ethical.*use.*technology|ethics.*\bai\b"),
    _rule("work_location", r"relocat|remote work|work remotely|hybrid"),
    _rule("availability", r"when.*(available|start)|start date|availability"),

    # Contact & personal
    _rule("contact", r"how.*contact|reach (out to )?you|get in touch|your (email|phone|linkedin|github)"),
    _rule("hobbies", r"what.*do.*for fun|hobbies|interests|outside (of )?work|free time|enjoy doing|passion outside"),
)


def match_template(question: str) -> str | None:
    """Name of the first template rule matching the raw question, or None."""
    for rule in TEMPLATE_RULES:
        if rule.matches(question):
            logger.debug("template_matched", extra={"pattern": rule.name})
            return rule.name
    return None
