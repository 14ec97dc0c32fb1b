"""LLM prompts for answering and knowledge graph extraction."""

ANSWER_SYSTEM_PROMPT = (
    "You are a helpful AI assistant. Provide clear, detailed, and informative answers."
)

EXTRACTION_SYSTEM_PROMPT = """You are a knowledge graph extraction expert. Extract entities and their relationships from the given text.

Rules:
- Extract 6-12 meaningful entities (people, places, concepts, organizations, events, technologies)
- Create 8-15 relationships that show how entities connect
- Use clear, descriptive relationship labels (e.g., "invented", "located in", "part of", "influences")
- Include the question topic as an entity
- Ensure relationships form a connected graph
- Return valid JSON only"""

# Literal braces are doubled for str.format
EXTRACTION_PROMPT = """Question: {question}

Answer: {answer}

Extract entities and relationships in this exact JSON format:
{{
  "entities": [
    {{
      "id": "entity_1",
      "name": "Entity Name",
      "type": "concept|person|place|organization|event|technology|other",
      "description": "Brief description"
    }}
  ],
  "relationships": [
    {{
      "source": "entity_1",
      "target": "entity_2",
      "label": "relationship type",
      "strength": 0.8
    }}
  ]
}}"""

JSON_RESPONSE_FORMAT = {"type": "json_object"}
