# Reference corpus for the predictability model. Changing any sentence changes
# every perplexity the engine reports, so bump the version with it.

from __future__ import annotations

REFERENCE_CORPUS_VERSION = "1"

_ACADEMIC = (
    "the quick brown fox jumps over the lazy dog",
    "research shows that many factors contribute to outcomes",
    "studies have demonstrated various approaches to solving problems",
    "in conclusion evidence suggests several important findings",
    "furthermore additional research reveals new insights about",
    "these findings indicate that future work should explore",
    "however there are limitations that should be considered",
    "moreover results contribute to our understanding of",
    "nevertheless this study provides valuable evidence for",
    "the data analysis reveals significant patterns in results",
    "on the other hand some researchers argue that",
    "it is important to note that these results show",
    "subsequent experiments confirmed these initial observations",
    "despite these challenges methodology proved effective",
    "the theoretical framework suggests that relationships exist between",
    "empirical evidence supports the hypothesis that",
    "statistical analysis demonstrates correlation between variables",
    "qualitative data reveals nuanced insights about",
    "quantitative measurements indicate substantial variation in",
    "preliminary findings suggest potential applications for",
)

_CONVERSATIONAL = (
    "hey what's up I was wondering if you could help",
    "thanks so much for your time and consideration",
    "I think this is a really interesting point",
    "to be honest I'm not completely sure about this",
    "let me know what you think when you get a chance",
    "sorry for the delay in getting back to you",
    "that makes sense I hadn't thought of it that way",
    "great idea let's definitely move forward with that",
    "I appreciate you bringing this to my attention",
    "no worries at all these things happen",
)

_NARRATIVE = (
    "the old house stood silently against the stormy sky",
    "she walked through the garden remembering childhood memories",
    "music filled the room with warmth and nostalgia",
    "the city lights reflected in the puddles below",
    "time seemed to slow down as the moment approached",
    "his words hung in the air like fragile glass",
    "the story unfolded like a carefully crafted tapestry",
    "shadows danced across the walls in the moonlight",
    "the scent of rain brought back forgotten feelings",
    "every corner held secrets waiting to be discovered",
)

_TECHNICAL = (
    "the system architecture supports multiple concurrent users",
    "implementation requires careful consideration of edge cases",
    "performance metrics indicate significant improvement over baseline",
    "the API documentation provides comprehensive usage examples",
    "debugging revealed several memory allocation issues",
    "the deployment process includes automated testing stages",
    "security protocols must be strictly enforced at all levels",
    "the database schema normalization reduces redundancy",
    "code review identified potential optimization opportunities",
    "the integration test suite covers all major use cases",
)

_MIXED = (
    "although the initial results were promising further investigation revealed unexpected complications",
    "despite extensive preparation the project encountered numerous challenges that required immediate attention",
    "the comprehensive analysis demonstrated clear correlations between variables previously thought to be independent",
    "while the theoretical framework provides a solid foundation practical implementation requires additional considerations",
    "given the complexity of the issue a multidisciplinary approach offers the most promising path forward",
)

REFERENCE_CORPUS: tuple[str, ...] = _ACADEMIC + _CONVERSATIONAL + _NARRATIVE + _TECHNICAL + _MIXED
