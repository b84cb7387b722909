# File: vocalcoach/features/analysis/service/prompts.py
from typing import Sequence

from vocalcoach.features.exercises.domain.models import Exercise

TRANSCRIPTION_SYSTEM_PROMPT = """You are an expert audio transcriptionist. Transcribe the audio recording as accurately as possible.
Insert a timestamp marker in the format [M:SS] at the start of each new paragraph or whenever the speaker, topic, or scene changes significantly.
Output ONLY the transcript text with embedded timestamp markers. No commentary, headers, or extra text."""

ANALYSIS_SYSTEM_PROMPT = """You are an expert vocal coach. You score singing from timestamped transcripts and always answer with a single JSON object."""

PERFORMANCE_RUBRIC = """You are evaluating a student's solo singing performance from a timestamped transcript of the recording.

Evaluate these five dimensions on a 0.0-10.0 scale:
- pitch: intonation accuracy, staying on note, interval accuracy
- tone: resonance, warmth, consistency of vocal colour
- breath: support, phrase length, control, tension signs
- timing: rhythm, feel, phrasing groove
- overall: holistic impression, weighted toward pitch and tone

Scoring guide:
  8-10  Professional or near-professional quality
  6-7   Developing singer with solid technique emerging
  4-5   Amateur with clear fundamentals but significant rough edges
  1-3   Foundational technical issues across multiple areas

tldr: 2-3 sentences. Biggest strength, clearest area to improve, and the single most impactful drill.
keyMoments: 3-5 timestamped moments, both positives and issues.
recommendedExerciseNames: choose 4-6 exercises from the provided list that cover the weakest dimensions. Do not cluster all picks into one category."""

LESSON_RUBRIC = """You are analysing a student's singing lesson from a timestamped transcript.
The transcript contains both teacher instruction and student singing.
Base ALL scores ONLY on the student's actual singing. Exclude teacher demonstrations.

Evaluate these five dimensions on a 0.0-10.0 scale:
- pitch: intonation accuracy in exercises and song attempts
- tone: resonance and quality when the student sings
- breath: support and control during the student's singing
- timing: rhythm and feel in the student's singing
- overall: holistic impression of the student's current level

Scoring guide (student's singing only):
  8-10  Strong technique emerging clearly, taking coaching well
  6-7   Showing improvement and responding to exercises
  4-5   Early stage, fundamentals present but inconsistent
  1-3   Foundational issues across multiple dimensions

tldr: 2-3 sentences. Root cause issue the lesson revealed, what showed progress, and the #1 drill to practise before the next lesson.
keyMoments: 4-6 timestamped moments covering exercises, breakthroughs, and persistent issues.
recommendedExerciseNames: choose 4-6 exercises from the provided list that cover the weakest dimensions. Do not cluster all picks into one category."""

RESPONSE_FORMAT = """Respond with ONLY a JSON object of this shape. No markdown fences, no explanation.
{"overall": <number>, "pitch": <number>, "tone": <number>, "breath": <number>, "timing": <number>,
 "tldr": "<string>",
 "keyMoments": [{"timestamp": "<M:SS>", "text": "<string>"}],
 "recommendedExerciseNames": ["<exact exercise name>"]}"""

EMPTY_LIBRARY_PLACEHOLDER = "(no exercises in library yet)"


def format_exercise_list(exercises: Sequence[Exercise]) -> str:
    if not exercises:
        return EMPTY_LIBRARY_PLACEHOLDER
    return "\n".join(f"- {e.name} [{e.category}]" for e in exercises)


def build_analysis_prompt(transcript: str, is_performance: bool, exercises: Sequence[Exercise]) -> str:
    rubric = PERFORMANCE_RUBRIC if is_performance else LESSON_RUBRIC
    return f"""{rubric}

---

TRANSCRIPT:
{transcript}

---

AVAILABLE EXERCISES (use EXACT names when recommending):
{format_exercise_list(exercises)}

---

{RESPONSE_FORMAT}"""
