"""
Presentation tree assembly: validated payload -> frozen view dataclasses.

Modules
-------
views       : Frozen dataclass node types + ``to_dict()`` for JSON output.
insights    : normalize_insight() — any insight value -> one display string.
qa_analysis : assemble_qa_analysis() — question/answer section.
training    : assemble_training() + explain_gap() — recruiter training
              section, display-variant tables and gap explanations.
dashboard   : build_dashboard() — both sections for one AnalysisPayload.

Nothing here touches the filesystem or network; the same input always yields
an equal tree.  ``build_dashboard`` logs one summary line per call.
"""
