"""NYC Property Compliance MCP Server — FastMCP entry point.

Exposes the compliance evaluation core as MCP tools: local law applicability
and due dates, violation severity, violation aging, a property score, and
agency / certificate-of-occupancy context.
All tools are pure computations over the arguments given; nothing is
fetched or stored.

Run locally:
    python -m compliance.server
"""

import logging
import os

from fastmcp import FastMCP

from compliance.tools.local_law_compliance import local_law_compliance
from compliance.tools.violation_severity import violation_severity
from compliance.tools.violation_aging import violation_aging
from compliance.tools.compliance_score import compliance_score
from compliance.tools.property_context import property_context

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "NYC Property Compliance",
    instructions=(
        "NYC property compliance MCP server. "
        "local_law_compliance evaluates 11 recurring NYC local law obligations "
        "(facade, energy benchmarking/emissions/audits, gas piping and detectors, "
        "elevators, cranes, lighting, sprinklers) from building attributes and "
        "reports status and due dates. violation_severity classifies a violation "
        "as Critical/High/Medium/Low with a recommended action. violation_aging "
        "flags stale open violations that should drop out of active counts. "
        "compliance_score grades a property 0-100 from its violations and laws. "
        "property_context lists the agencies that cite a building with lookup "
        "links, its Certificate of Occupancy status, and decodes DOB complaint codes."
    ),
)

mcp.tool()(local_law_compliance)
mcp.tool()(violation_severity)
mcp.tool()(violation_aging)
mcp.tool()(compliance_score)
mcp.tool()(property_context)


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING").upper())
    mcp.run()
