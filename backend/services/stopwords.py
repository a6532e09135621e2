"""Stop words dropped by the tokenizer.

Only words longer than two characters matter here: anything shorter is
discarded by length before the stop-word check.
"""

STOPWORDS: frozenset[str] = frozenset({
    # Articles, conjunctions, prepositions
    "the", "and", "but", "nor", "for", "yet", "with", "without", "within",
    "from", "into", "onto", "upon", "about", "above", "below", "across",
    "after", "before", "between", "during", "through", "under", "over",
    "against", "among", "around", "along", "behind", "beyond", "toward",
    "towards", "via", "per", "than", "then", "also", "both", "either",
    "neither", "whether", "while", "because", "since", "until", "unless",
    "although", "though",
    # Pronouns and determiners
    "you", "your", "yours", "yourself", "our", "ours", "ourselves",
    "they", "them", "their", "theirs", "she", "her", "hers", "him", "his",
    "its", "itself", "this", "that", "these", "those", "who", "whom",
    "whose", "which", "what", "any", "all", "each", "every", "some",
    "such", "other", "another", "own", "same", "few", "more", "most",
    "much", "many", "one", "ones",
    # Auxiliaries and common verbs
    "are", "was", "were", "been", "being", "have", "has", "had", "having",
    "does", "did", "doing", "done", "can", "could", "will", "would",
    "shall", "should", "may", "might", "must", "get", "got", "gets",
    # Adverbs and fillers
    "not", "only", "very", "too", "just", "now", "here", "there", "when",
    "where", "why", "how", "again", "further", "once", "out", "off",
    "down", "etc", "well", "able", "like",
    # Résumé / job-posting boilerplate that says nothing about fit
    "experience", "experienced", "experiences", "looking", "seeking",
    "skills", "skill", "skilled", "ability", "abilities", "knowledge",
    "required", "requirements", "preferred", "responsibilities",
    "including", "candidate", "candidates", "role", "position",
    "opportunity", "years", "year", "plus",
})
