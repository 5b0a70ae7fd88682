"""Sample interview transcripts for trying the analysis without real data."""

from __future__ import annotations

from typing import List

SAMPLE_INTERVIEWS = (
    """Interview with Sarah - Product Manager at TechCorp

Interviewer: Thanks for joining. Can you tell me about your current workflow?

Sarah: Sure. I spend about 4 hours a week just copy-pasting data between our CRM and our analytics tool. It's really tedious. There's no integration, so I have to manually export CSVs, clean them up, and then import them.

Interviewer: That sounds painful. What would help?

Sarah: An automatic sync would be huge. Or even just a better export format from the CRM. Right now the exports are messy and require a lot of cleanup.

Interviewer: Any other frustrations?

Sarah: The reporting is limited. I can't create custom dashboards for my team. We all need different views but there's only one standard report.""",
    """Interview with Mike - Engineering Lead at StartupXYZ

Interviewer: What's your biggest pain point right now?

Mike: Documentation. Our knowledge base is outdated and nobody updates it. When new engineers join, they ask the same questions over and over.

Interviewer: How do you handle that?

Mike: We end up having senior devs repeat themselves in Slack. It's not scalable. We need something that makes documentation easy to keep updated, maybe integrated with our workflow.

Interviewer: What would your ideal solution look like?

Mike: Something that automatically documents code changes. Or at least reminds devs to update docs when they modify something. Right now it's purely manual and easy to forget.""",
    """Interview with Lisa - Customer Success Manager

Interviewer: What feedback do you hear from customers?

Lisa: They love the product, but onboarding is confusing. They don't know where to start. There's no guided tour or checklist.

Interviewer: What happens then?

Lisa: They churn early or they bombard support with basic questions. Our team spends 60% of time answering questions that should be in the product.

Interviewer: What would help?

Lisa: An interactive onboarding flow. In-product tooltips. A getting started checklist. Something that guides new users without them having to contact support.""",
)


def sample_interviews() -> List[str]:
    return list(SAMPLE_INTERVIEWS)
