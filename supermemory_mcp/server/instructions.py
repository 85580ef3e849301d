"""Tool descriptions, server instructions, and prompt text for Supermemory MCP."""

# fmt: off
# ruff: noqa: E501
SERVER_INSTRUCTIONS = """
Supermemory MCP gives AI assistants a persistent memory of the user, stored in Supermemory.
Memories are scoped to the configured user and, optionally, to a project.

- Call `search(informationToGet)` before answering questions about the user's preferences,
  past interactions or technical setup.
- Call `addMemory(thingToRemember)` whenever the user shares something worth remembering.
- Pass `projectId` to either tool to keep memories for one project apart from the rest.
- `whoAmI()` reports which user ID memories are stored under.
""".strip()

ADD_MEMORY_DESCRIPTION = "Store user information, preferences, and behaviors. Run on explicit commands ('remember this') or implicitly when detecting significant user traits, preferences, or patterns. Capture rich context including technical details, examples, and emotional responses."

SEARCH_DESCRIPTION = "Search user memories and patterns. Run when explicitly asked or when context about user's past choices would be helpful. Uses semantic matching to find relevant details across related experiences."

GET_PROJECTS_DESCRIPTION = "List user projects. Use the returned containerTag (e.g., sm_project_alpha) as the projectId in other tools. Bare IDs are accepted and normalized to sm_project_{id}."

WHO_AM_I_DESCRIPTION = "Get the current logged-in user's information"

PROMPT_DESCRIPTION = "A prompt that gives information about supermemory and how to use it effectively."

SUPERMEMORY_PROMPT = """IMPORTANT: You MUST use Supermemory tools proactively to be an effective assistant. Here's how:

1. ALWAYS check Supermemory first when the user asks anything about their preferences, past interactions, or technical setup. Don't assume you know everything - search first!

2. AUTOMATICALLY store new information after EVERY user message that contains:
- Technical preferences (languages, tools, frameworks)
- Coding style or patterns
- Project requirements or constraints
- Opinions or feedback
- Problem-solving approaches
- Learning style or experience level

3. Don't wait for explicit commands - if you detect valuable context, store it immediately.

4. Think of yourself as building a comprehensive user profile. Every interaction is an opportunity to learn and store more context.

Failure to use these tools means you're operating with incomplete information and not providing the best possible assistance. Make Supermemory your first instinct, not your last resort."""
# fmt: on
