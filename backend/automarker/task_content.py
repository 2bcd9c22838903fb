# backend/automarker/task_content.py
# Static task content for the "Office Monday" prioritisation task.

QUESTION_TEXT = """TASK

It’s 9:05am on a Monday. You work in an office role supporting projects, communications, and admin tasks. When you open your inbox, you find five new requests that all claim urgency, from different people across the organisation:

1) Line Manager (Operations)
Needs a summary slide deck for a leadership meeting at 2pm today. The data already exists but must be condensed into clear key messages.

2) Senior Colleague (Finance)
Asks you to review a cost spreadsheet “as soon as possible” before it is sent to an external partner. Errors could be reputationally damaging.

3) Project Lead (Delivery Team)
Messages you on Teams asking for help rewriting an email to a client who is unhappy about a delay. The tone must be professional and calming.

4) New Starter You Mentor
Emails asking for help using the internal system. They say they are blocked and can’t progress their work without guidance.

5) Your Own Deadline
You must submit your weekly report by 5pm today, and you haven’t started it yet.

You can’t do everything at once. You decide to use AI as a prioritisation assistant (you remain responsible for the final decisions).

YOUR TASK

Write a FEthink prompt using the four-stage structure:
Role → Task → Context → Format

Your prompt must instruct an AI assistant to:
- Analyse the five requests
- Weigh urgency, importance, reputational risk, and dependencies
- Propose a prioritised action plan for today
- Create a realistic, time-blocked plan for the working day
- Provide a simple decision rule for handling new tasks that arrive later
- Include 3 short reusable prompts the learner can use each Monday
- End with one reflective question to help the learner improve how they use AI to prioritise over time

OUTPUT CONSTRAINT
The AI’s response must be one page maximum (max 400 words) and practical for real office use."""

TEMPLATE_TEXT = """Role:
Task:
Context (Audience):
Format:"""

TARGET_WORDS = "100–250"

MODEL_ANSWER = """MODEL PROMPT (Role / Task / Context / Format)

Role: You are a workplace productivity coach who helps busy office workers prioritise competing requests under time pressure.
Task: Analyse five incoming work requests and produce a prioritised action plan for the day. Use urgency, importance, reputational risk, and dependencies to justify the order. Then propose a realistic time-blocked plan for the working day.
Context (Audience): The user is overwhelmed on a Monday morning with five competing requests: (1) leadership slides due 2pm, (2) finance spreadsheet review before sending to an external partner, (3) client email rewrite to manage disappointment and tone, (4) new starter support to unblock work, and (5) the user’s own weekly report due 5pm. The user needs a calm, structured plan and a rule for handling new requests.
Format: One-page practical plan (max 400 words) including:
- Prioritised task list with brief reasons for the order
- Time-blocked plan for the working day (morning / midday / afternoon)
- One simple decision rule for handling new tasks
- Three short reusable “Monday planning” AI prompts
- One reflective question at the end
Use clear bullet points, a supportive professional tone, and realistic assumptions.

--------------------------------------------
DUMMY AI RESPONSE (Example output)

Prioritised task order (with reasons):
1) Finance spreadsheet review — high reputational risk if errors go to an external partner; likely quick to check.
2) Leadership slide summary — fixed deadline (2pm) and senior audience; needs focused time to condense key messages.
3) Client email rewrite — tone/reputation risk; can be done efficiently with AI once key facts are clear.
4) New starter support — dependency: unblocks their work; schedule a short focused slot.
5) Weekly report — protect a block later; draft then refine.

Time-blocked plan:
09:15–09:45 Finance review
09:45–10:45 Leadership slides
11:00–11:20 Client email rewrite
11:30–11:45 New starter support
14:30–16:00 Weekly report draft

Decision rule for new tasks:
If it creates external reputational risk OR blocks others from working, assess today. Otherwise schedule or park with a clear review time.

Reusable Monday prompts:
- “Rank these tasks by urgency, impact, risk, and dependencies. Explain the trade-offs.”
- “Turn my priorities into a realistic time-block plan for today with buffers.”
- “If new tasks arrive, help me decide what to do now vs park, using my decision rule.”

Reflective question:
Which task did I feel tempted to do first — and was that urgency real, or just anxiety?"""

# "Learn more" tips. Keys are fixed element ids in the front-end.
FRAMEWORK = {
    "gdpr": {
        "expectation": "Force trade-offs: ask the AI to plan under constraints (e.g., ‘If I can only finish two tasks before lunch…’) so you stop over-committing.",
        "case": "Try: “Assume I have 90 minutes before my first meeting. Which two tasks reduce the most risk and why? What gets parked?”",
    },
    "unesco": {
        "expectation": "Separate urgency from anxiety: get the AI to label what feels urgent vs what is operationally urgent (deadline/risk/dependency).",
        "case": "Try: “Which tasks are genuinely time-critical vs emotionally noisy? Re-rank with reasons.”",
    },
    "ofsted": {
        "expectation": "Make the AI produce a decision rule: a simple ‘if/then’ that protects focus when new tasks arrive.",
        "case": "Try: “Write a 2-line decision rule for new tasks and show 2 examples of how it applies.”",
    },
    "jisc": {
        "expectation": "Build a repeatable weekly ritual: turn prioritisation into a 5-minute Monday habit with reusable prompts and a review step.",
        "case": "Try: “Give me 3 reusable prompts for planning, reprioritising, and reviewing each week. Keep them short.”",
    },
}
