"""
responder/answers.py — Hand-written answers for the named question templates.

One long-form, first-person paragraph per rule in nlp/templates.py.
The table is read-only and built once at import.
"""
from types import MappingProxyType

CANNED_ANSWERS = MappingProxyType({
    # ── Resume & background ──────────────────────────────────────────────────
    "resume_overview": (
        "Great question! Let me walk you through my journey. I'm **Jordan Ellis** from Tulsa, OK. "
        "I completed both my **Bachelor's in BBA-MIS** (2021-2025) and my **Master's in Management "
        "Information Technology** (2023-2025) at Red River State University. Right now I'm a "
        "**Business Architect Intern at Northwind Consulting working with Pega** on digital "
        "transformation and enterprise automation. Before that I was a **Business Analyst Intern at "
        "Prairie Fuel Co**, where I automated reporting pipelines and cut reporting latency by 21%. "
        "I also did a consumer insights externship with Soundwave Audio, taught SQL labs as a "
        "Graduate Assistant, and learned leadership the hard way managing a retail store. On the side "
        "I build AI projects like this avatar, PomoPal and Hearth AI. The common thread: I like "
        "finding where a business is losing time and fixing it with technology."
    ),
    "education_motivation": (
        "I pursued both degrees because I wanted a **complete foundation**. The Bachelor's gave me "
        "business fundamentals (strategy, finance, management) alongside IT systems thinking, and the "
        "Master's deepened the technical side: **AI, cloud computing, analytics programming and "
        "business process automation**. The Bachelor's taught me *what* businesses need; the Master's "
        "taught me *how* to build it. Doing them back to back meant I could apply one to the other "
        "immediately, which is exactly how I work today."
    ),
    "why_university": (
        "Red River State was the right fit for me. **Academically**, the MIS program is strong and the "
        "faculty bring real industry experience into the classroom. **Practically**, the business "
        "college has close corporate relationships, which is how I landed my internships at Prairie "
        "Fuel and Northwind and the Soundwave externship. It was also close to family, and the "
        "cost-to-value ratio let me focus on learning instead of debt."
    ),
    "why_mis": (
        "I chose **Management Information Technology over pure Computer Science** because I wanted to "
        "solve business problems, not just write code. MIS sits at the intersection: we learn the "
        "technical depth (Python, SQL, cloud, AI) *and* how to apply it where it creates value. At "
        "Prairie Fuel, for example, the hard part wasn't writing the pipeline; it was knowing which "
        "report the operations team actually waited on every morning."
    ),
    "business_tech_integration": (
        "This is my favourite part of the job, and I do it every day. I start with the business "
        "outcome (what decision gets faster, what cost goes away), then work backwards to the "
        "simplest technical design that gets there. At Northwind that means turning stakeholder "
        "interviews into Pega case flows; at Prairie Fuel it meant translating 'reports are slow' into "
        "a concrete SQL and Python automation with a measurable 21% latency win."
    ),

    # ── Digital transformation & direction ───────────────────────────────────
    "digital_transformation": (
        "Based on my experience, **digital transformation is using technology to change how work gets "
        "done, not just digitising the old process**. Moving a paper form into a PDF isn't "
        "transformation; redesigning the workflow so the form isn't needed is. The test I use: does a "
        "person downstream get their answer faster, with fewer hand-offs, and can we measure it?"
    ),
    "passion_origin": (
        "My passion for this started in retail. Managing a store, I saw **inefficiency everywhere**: "
        "manual inventory counts, schedules on paper, the same report rebuilt every week. When I "
        "learned a little Python and automated one of those reports, I got hours of my week back. "
        "That feeling of removing pointless work for people is what still drives me."
    ),
    "career_vision": (
        "My **long-term vision** is to become a **Digital Transformation Architect or AI Strategy "
        "Consultant**: someone who can sit with executives to shape the roadmap and then sit with "
        "engineers to build it. Short term, I want to keep shipping real automation and AI systems so "
        "that advice is grounded in things I've actually delivered. Eventually I'd like to lead a "
        "team doing exactly that and mentor people coming from non-traditional backgrounds."
    ),
    "most_impactful": (
        "The experience that shaped me most was **my internship at Prairie Fuel Co**. It was the first "
        "time my work fed real business decisions at scale. I learned to (1) interview the people who "
        "use a report before touching the data, (2) automate the boring parts first, and (3) measure "
        "the result. The 21% reporting latency reduction came from that discipline, not from any "
        "fancy tool."
    ),

    # ── Specific roles ───────────────────────────────────────────────────────
    "northwind_role": (
        "At **Northwind Consulting, as a Business Architect Intern working with Pega**, I sit between "
        "clients and the delivery team. I run discovery sessions, map current-state processes, and "
        "design the future-state case flows our developers build in Pega. A typical win is replacing "
        "a manual, twenty-step approval chain with a routed case that handles the routine approvals "
        "automatically and only escalates the exceptions."
    ),
    "soundwave_insights": (
        "The **Soundwave Audio externship** was a crash course in consumer insight work. As a "
        "qualitative and quantitative insights extern I combined survey results with social listening "
        "data, found the themes that actually moved purchase intent, and turned them into a short deck "
        "for the product marketing team. It taught me that the best analysis is the one a busy person "
        "can act on in five minutes."
    ),
    "prairie_analytics": (
        "Happy to break down that **21% reporting latency reduction at Prairie Fuel**. The daily "
        "operations reports were assembled from several systems with manual exports in between. I "
        "rebuilt the flow as scheduled Python jobs with consolidated SQL queries, removed the manual "
        "hand-offs, and added validation so bad data failed loudly instead of silently. Reports landed "
        "earlier every morning, and analysts stopped spending their first hour copy-pasting."
    ),
    "teaching_role": (
        "Being a **Graduate Assistant for Business Analysis & Database Administration** was really "
        "rewarding. I ran SQL labs, graded database design projects and held office hours for about "
        "120 students. Explaining joins ten different ways made me much better at SQL myself, and it "
        "taught me to explain technical ideas to people without a technical background."
    ),
    "retail_experience": (
        "**Managing at Corner Market** (2018-2022) was my first real leadership experience. I handled "
        "scheduling, inventory and daily operations for a team of eight while in school. It taught me "
        "accountability, how to keep a team motivated on a bad day, and it's honestly where my "
        "interest in automation started: so many of our headaches were process problems."
    ),

    # ── Projects ─────────────────────────────────────────────────────────────
    "avatar_inspiration": (
        "This **Avatar Chat Portfolio** came from a simple frustration: **traditional resumes are "
        "one-way and static**. I wanted recruiters to be able to ask the questions they actually care "
        "about and get a real answer. So I built a 3D avatar that talks, backed by a rule-based "
        "responder for the common questions and an optional language model for everything else. "
        "You're using it right now!"
    ),
    "pomopal_purpose": (
        "**PomoPal solves a problem I had myself**: productivity tools were either too simple to help "
        "or too complex to stick with. PomoPal is a small desktop companion (Python and PySide6) that "
        "runs Pomodoro sessions and adapts break suggestions to how you actually work. It's friendly "
        "enough that you keep it open, which is the whole point."
    ),
    "hearth_privacy": (
        "**Privacy was the core idea behind Hearth AI**. Household repair questions reveal a lot about "
        "your home, and I didn't think that data should leave it. So Hearth runs a local LLM "
        "(Phi-3.5-mini) with retrieval over appliance manuals entirely on your machine: no accounts, "
        "no cloud calls, and it still gives genuinely useful step-by-step answers."
    ),
    "linkedin_motivation": (
        "The **LinkedIn Sentiment Assistant** came from frustration with engaging on LinkedIn "
        "manually. It's a Chrome extension that scores the sentiment of a post and drafts a thoughtful "
        "reply you can edit. Building it taught me a lot about running transformer models in the "
        "browser and about keeping a human in the loop."
    ),

    # ── Technical depth ──────────────────────────────────────────────────────
    "cloud_preference": (
        "I **lean towards AWS, but I'm platform-agnostic**. AWS has the broadest service catalogue and "
        "it's where I'm certifying; Azure is the natural choice in Microsoft-heavy enterprises; GCP "
        "has excellent data and ML tooling. I'd rather pick the platform the organisation can "
        "actually operate than the one I personally like best."
    ),
    "sql_proficiency": (
        "SQL is one of my strongest skills. I'm comfortable with every join type, **window functions** "
        "(ranking, running totals, lag/lead for period-over-period analysis), **CTEs** for breaking "
        "complex logic into readable steps, and query tuning with indexes and execution plans. I also "
        "taught it, which forces you to really understand it."
    ),
    "debugging_approach": (
        "My **Python debugging process** is systematic: (1) reproduce the bug consistently, "
        "(2) read the full traceback and the logs before guessing, (3) narrow it down with a minimal "
        "failing case, (4) fix the cause rather than the symptom, and (5) add a test so it can't come "
        "back quietly."
    ),
    "ai_library_preference": (
        "Tough choice, but here's my take: for **orchestrating LLM applications** (retrieval, tools, "
        "prompt chains) I reach for **LangChain**; for **working with models directly** (fine-tuning, "
        "embeddings, running local transformers) **Hugging Face** is unbeatable. In Hearth AI I used "
        "both: Hugging Face for the model, LangChain for the retrieval pipeline."
    ),
    "automation_tools": (
        "I've built automation on both sides of the fence: **UiPath** bots for screen-level RPA when a "
        "legacy system has no API, and **Pega** case management for end-to-end workflow automation. "
        "My rule of thumb is to use RPA as a bridge and real workflow design as the destination."
    ),
    "data_visualization": (
        "I build dashboards in **Tableau and Power BI**, usually on top of **Snowflake** or SQL Server. "
        "I design them backwards from the decision: one question per view, the answer visible in "
        "five seconds, and drill-downs only where people actually need them."
    ),

    # ── Leadership ───────────────────────────────────────────────────────────
    "leadership_club": (
        "Being **Events Chair for the Presidents Leadership Club** was a great leadership lab. I "
        "planned speaker events and networking nights, coordinated volunteers, and managed a small "
        "budget. The biggest lesson: clear ownership and a shared calendar solve most of the "
        "problems people blame on 'communication'."
    ),
    "time_management": (
        "**Balancing two degrees, internships, projects and extracurriculars** took discipline. I time "
        "block my week on Sunday, protect deep-work hours for building, batch small tasks, and say no "
        "to things that don't serve my goals. PomoPal exists partly because I needed it myself."
    ),
    "team_motivation": (
        "**Motivating a team starts with understanding what drives each person** and connecting their "
        "work to a shared purpose. In retail that meant fair schedules and recognising effort in "
        "public; on project teams it means clear goals, visible progress and giving people real "
        "ownership of a piece of the outcome."
    ),
    "handling_conflict": (
        "When I disagree with someone I try to **separate the problem from the person**. I ask "
        "questions until I can state their position back to them, agree on what a good outcome looks "
        "like, and then compare options against that. Most conflicts turn out to be different "
        "assumptions, and data settles those quickly."
    ),

    # ── Values and fit ───────────────────────────────────────────────────────
    "work_culture": (
        "The culture that motivates me has **four pillars**: (1) learning and growth, (2) ownership "
        "over real problems, (3) candid, kind feedback, and (4) a focus on outcomes over hours. I do "
        "my best work where people are trusted to figure things out and share what they learn."
    ),
    "handling_failure": (
        "I handle failure and criticism in **four steps**: pause before reacting, separate the "
        "feedback from my ego, find the one or two concrete changes worth making, and follow up so the "
        "person sees it landed. Criticism is free consulting if you treat it that way."
    ),
    "why_hire": (
        "You should hire me because I bring a **rare combination of technical depth, business acumen "
        "and a track record of shipping**. I can build the pipeline, the model or the workflow myself, "
        "and I can explain to a stakeholder why it matters and how we'll measure it. I learn fast, I "
        "care about outcomes, and I've already delivered measurable results like the 21% reporting "
        "improvement at Prairie Fuel."
    ),
    "greatest_strength": (
        "My greatest strength is **translating between business and technology**. I can sit in a "
        "requirements workshop in the morning and write the SQL or Python that implements it in the "
        "afternoon, which removes a lot of the lost-in-translation cost projects usually pay."
    ),
    "weakness": (
        "Honestly, I used to **over-engineer**: I'd reach for the most interesting technology instead "
        "of the simplest one that works. I've worked on it by writing down the success metric before "
        "designing anything, and asking 'what's the smallest version that proves this?'"
    ),
    "learning_from_mistakes": (
        "One of my biggest early mistakes was **over-engineering a dashboard project**: I planned "
        "microservices and containers for what needed to be a scheduled query and a spreadsheet. It "
        "shipped late and nobody cared about the architecture. What I learned: start from the user's "
        "problem, ship the simplest thing, then improve what people actually use."
    ),
    "tech_ethics": (
        "**Ethical technology use matters most with AI**. My principles: privacy by design (Hearth AI "
        "runs fully local for that reason), transparency about when people are talking to a machine, "
        "keeping a human in the loop for consequential decisions, and checking systems for bias "
        "before they reach users."
    ),
    "work_location": (
        "I'm based in **Tulsa, OK** and I'm open to hybrid, remote or on-site roles. For the right "
        "opportunity I'm happy to relocate. I've worked well remotely (my Soundwave externship was "
        "fully remote) and I also enjoy being in the room for discovery work."
    ),
    "availability": (
        "My Northwind internship wraps up in December 2025 and my degrees are complete, so I'm "
        "**available for full-time roles from January 2026**, and I'm happy to talk about "
        "earlier start dates for part-time or contract work."
    ),

    # ── Contact & personal ───────────────────────────────────────────────────
    "contact": (
        "I'd love to connect! Here's how to reach me:\n\n"
        "📧 **Email:** jordan.ellis@example.com\n"
        "📱 **Phone:** (555) 010-0142\n"
        "💼 **LinkedIn:** linkedin.com/in/jordan-ellis\n"
        "💻 **GitHub:** github.com/jordanellis\n\n"
        "Feel free to reach out about opportunities, collaborations, or just to talk tech!"
    ),
    "hobbies": (
        "Outside of work I'm pretty well-rounded! I **love cats** 🐱 (I once 3D-printed a splint for "
        "my cat's injured tail), I'm into **fitness**, I tinker with **3D printing** and cars, and I'm "
        "always hunting for the best Thai food in town. I also volunteer with student groups, "
        "helping first-generation students find their way into tech."
    ),
})

AI_NEWS_REDIRECT = (
    "That's a great question about current AI trends! I'm Jordan's portfolio assistant, focused on "
    "background and experience, so I can't give you real-time news. But I can tell you what **I'm** "
    "excited about and working on: **retrieval-augmented generation** (like this conversation!), "
    "**local LLMs** that keep data private, and **AI-driven workflow automation** in the enterprise. "
    "Want to hear how I use any of those in my projects?"
)

APOLOGY = (
    "I appreciate the question! I'm having a brief technical moment. Could you try rephrasing, or "
    "ask about my projects, experience, skills, or education? I promise I'll give you a thoughtful "
    "answer!"
)


def canned_answer(pattern: str) -> str:
    """Answer for a template name, or a thinking stub for names without one."""
    return CANNED_ANSWERS.get(pattern, f"Great question! Let me think about that... {pattern}")
