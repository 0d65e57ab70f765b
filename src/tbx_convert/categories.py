"""
Data category tables for TBX-Basic to TBX-Min conversion.

Element and type names are matched against the local name of each
source element, so namespaced TBX v3 documents use the same tables.
"""

from tbx_convert.model import Status

STATUS_MAP = {
	"preferredTerm-admn-sts": Status.preferred,
	"admittedTerm-admn-sts": Status.admitted,
	"deprecatedTerm-admn-sts": Status.not_recommended,
	"supersededTerm-admn-sts": Status.obsolete,
	# spelling emitted by older TBX-Basic producers
	"supersededTerm-admn-st": Status.obsolete,
}

ENTRY_TAGS = {"termEntry", "conceptEntry"}
LANG_GROUP_TAGS = {"langSet", "langSec"}
TERM_GROUP_TAGS = {"tig", "ntig", "termSec"}

# (element, type attribute) pairs with a TBX-Min counterpart
SUBJECT_FIELD = ("descrip", "subjectField")
STATUS = ("termNote", "administrativeStatus")
PART_OF_SPEECH = ("termNote", "partOfSpeech")
CUSTOMER = ("admin", "customerSubset")

DIRECT_CATEGORIES = {SUBJECT_FIELD, STATUS, PART_OF_SPEECH, CUSTOMER}

# pasted into the term group note when found inside a term group
FALLBACK_TAGS = {"admin", "descrip", "transac", "termNote"}

HEADER_TAGS = {"title", "sourceDesc"}

# structure that is either consumed elsewhere or carries nothing
WRAPPER_TAGS = {
	"martif", "martifHeader", "fileDesc", "titleStmt", "text", "body",
	"termGrp", "tbx", "tbxHeader",
}

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"
