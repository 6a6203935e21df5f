"""Summary prompt templates for Gemini.

Model name and generation limits stored as constants so the completion
configuration lives in one place.
"""

# Gemini model constant -- update here when a newer flash model is preferred
GEMINI_MODEL = "gemini-2.5-flash"

# Completion configuration
MAX_OUTPUT_TOKENS = 2000
TEMPERATURE = 0.3  # Low: favor faithful, non-creative summaries

SYSTEM_PROMPT = (
    "You are an expert content summarizer who creates comprehensive, well-structured "
    "summaries that preserve practical value while improving readability."
)

_SUMMARY_PROMPT = """\
Please analyze and summarize the following YouTube video transcript in a structured markdown format.
The summary should be comprehensive but well-organized, removing only unnecessary filler words \
while preserving all important information that can be applied to real life or work.

Requirements:
1. Use structured markdown with clear headings
2. Include key points, actionable insights, and practical applications
3. Organize content logically (main topics, subtopics, examples)
4. Keep important details and examples that help understanding
5. Make it scannable with bullet points where appropriate
6. Include any mentioned resources, tools, or references
7. Provide a brief conclusion with key takeaways

Video URL: {video_url}

Transcript:
{transcript}

Please provide the summary in English, using clean markdown format.
"""


def build_summary_prompt(transcript: str, video_url: str) -> str:
    """Fill the fixed summary template with the source URL and transcript text."""
    return _SUMMARY_PROMPT.format(video_url=video_url, transcript=transcript)
