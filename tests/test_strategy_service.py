# tests/test_strategy_service.py
import unittest

from services.strategy_service import (
    UnknownBlockError, add_block, add_funnel_template, add_project, add_structure_template,
    company_projects, connect, delete_block, delete_edge, delete_project, duplicate_block,
    edit_block, grid_position, move_block, node_position, project_blocks, project_edges,
)


def block(id_, project_id="p1", order=1, position=None):
    b = {"id": id_, "title": id_.upper(), "description": "d", "type": "funil", "order": order,
         "projectId": project_id}
    if position is not None:
        b["position"] = position
    return b


class TestProjects(unittest.TestCase):
    def test_add_project_prepends(self):
        projects = add_project([{"id": "old"}], " Lançamento ", "funil", "Pascoto100k")
        self.assertEqual(projects[0]["title"], "Lançamento")
        self.assertEqual(projects[0]["company"], "Pascoto100k")
        self.assertEqual(projects[1], {"id": "old"})

    def test_blank_title_is_noop(self):
        projects = [{"id": "x"}]
        self.assertIs(add_project(projects, "  ", "funil", "Pascoto100k"), projects)

    def test_unknown_company(self):
        with self.assertRaises(ValueError):
            add_project([], "X", "funil", "Outra")

    def test_company_projects_sorted_by_creation(self):
        projects = [
            {"id": "b", "company": "Pascoto100k", "createdAt": "2026-02-01T00:00:00.000Z"},
            {"id": "c", "company": "Empório Pascoto", "createdAt": "2026-01-01T00:00:00.000Z"},
            {"id": "a", "company": "Pascoto100k", "createdAt": "2026-01-01T00:00:00.000Z"},
        ]
        self.assertEqual([p["id"] for p in company_projects(projects, "Pascoto100k")], ["a", "b"])

    def test_delete_project_cascades(self):
        projects = [{"id": "p1"}, {"id": "p2"}]
        blocks = [block("a"), block("b", "p2")]
        edges = [{"id": "e1", "source": "a", "target": "a", "projectId": "p1"},
                 {"id": "e2", "source": "b", "target": "b", "projectId": "p2"}]
        projects, blocks, edges = delete_project(projects, blocks, edges, "p1")
        self.assertEqual([p["id"] for p in projects], ["p2"])
        self.assertEqual([b["id"] for b in blocks], ["b"])
        self.assertEqual([e["id"] for e in edges], ["e2"])


class TestBlocks(unittest.TestCase):
    def test_add_block_sequence_and_grid_position(self):
        blocks = add_block([block("a", order=1), block("z", "p2")], "p1", "Etapa", "", "ads")
        new = blocks[0]
        self.assertEqual(new["order"], 2)
        self.assertEqual(new["position"], grid_position(2))
        self.assertEqual(new["description"], "Sem descrição")
        self.assertEqual(new["type"], "ads")

    def test_grid_wraps_every_four(self):
        self.assertEqual(grid_position(3), {"x": 740, "y": 80})
        self.assertEqual(grid_position(4), {"x": 80, "y": 240})

    def test_explicit_position_wins(self):
        blocks = add_block([], "p1", "Etapa", position={"x": 5, "y": 6})
        self.assertEqual(blocks[0]["position"], {"x": 5, "y": 6})

    def test_unknown_type_falls_back(self):
        self.assertEqual(add_block([], "p1", "X", block_type="nope")[0]["type"], "estrategico")

    def test_project_blocks_sorted_by_order(self):
        blocks = [block("c", order=3), block("a", order=1), block("x", "p2"), block("b", order=2)]
        self.assertEqual([b["id"] for b in project_blocks(blocks, "p1")], ["a", "b", "c"])

    def test_duplicate(self):
        original = block("a", position={"x": 100, "y": 50})
        blocks = duplicate_block([original], "a")
        copy = blocks[0]
        self.assertNotEqual(copy["id"], "a")
        self.assertEqual(copy["title"], "A (Cópia)")
        self.assertEqual(copy["position"], {"x": 130, "y": 80})
        for key in ("description", "type", "order", "projectId"):
            self.assertEqual(copy[key], original[key])
        self.assertEqual(blocks[1], original)

    def test_duplicate_without_position(self):
        copy = duplicate_block([block("a")], "a")[0]
        self.assertNotIn("position", copy)

    def test_duplicate_unknown_is_noop(self):
        blocks = [block("a")]
        self.assertIs(duplicate_block(blocks, "missing"), blocks)

    def test_move_keeps_order(self):
        blocks = move_block([block("a", order=7)], "a", 10, 20)
        self.assertEqual(blocks[0]["position"], {"x": 10, "y": 20})
        self.assertEqual(blocks[0]["order"], 7)

    def test_edit_block_keeps_blank_fields(self):
        blocks = edit_block([block("a")], "a", "Novo", "  ")
        self.assertEqual((blocks[0]["title"], blocks[0]["description"]), ("Novo", "d"))

    def test_delete_block_cascades_edges(self):
        blocks = [block("a"), block("b"), block("c", "p2")]
        edges = [
            {"id": "ab", "source": "a", "target": "b", "projectId": "p1"},
            {"id": "ba", "source": "b", "target": "a", "projectId": "p1"},
            {"id": "cc", "source": "c", "target": "c", "projectId": "p2"},
        ]
        blocks, edges = delete_block(blocks, edges, "a")
        self.assertEqual([b["id"] for b in blocks], ["b", "c"])
        self.assertEqual([e["id"] for e in edges], ["cc"])

    def test_node_position_fallback(self):
        self.assertEqual(node_position(block("a"), 4), {"x": 300, "y": 220})
        self.assertEqual(node_position(block("a", position={"x": 1, "y": 2}), 4), {"x": 1.0, "y": 2.0})


class TestEdges(unittest.TestCase):
    def test_connect_is_permissive(self):
        blocks = [block("a"), block("b")]
        edges = connect(blocks, [], "p1", "a", "b")
        edges = connect(blocks, edges, "p1", "a", "b")
        edges = connect(blocks, edges, "p1", "a", "a")
        self.assertEqual([(e["source"], e["target"]) for e in edges], [("a", "b"), ("a", "b"), ("a", "a")])
        self.assertEqual(len({e["id"] for e in edges}), 3)
        self.assertTrue(all(e["projectId"] == "p1" for e in edges))

    def test_connect_requires_existing_blocks(self):
        with self.assertRaises(UnknownBlockError):
            connect([block("a")], [], "p1", "a", "ghost")

    def test_delete_edge_and_project_edges(self):
        edges = [{"id": "1", "projectId": "p1"}, {"id": "2", "projectId": "p2"}]
        self.assertEqual(project_edges(edges, "p2"), [{"id": "2", "projectId": "p2"}])
        self.assertEqual(delete_edge(edges, "1"), [{"id": "2", "projectId": "p2"}])


class TestTemplates(unittest.TestCase):
    def test_funnel_is_a_linear_chain(self):
        blocks, edges = add_funnel_template([], [], "p1")
        self.assertEqual(len(blocks), 4)
        self.assertEqual(len(edges), 3)
        chain = project_blocks(blocks, "p1")
        self.assertEqual([b["title"] for b in chain], ["Atrair", "Capturar", "Nutrir", "Converter"])
        ids = [b["id"] for b in chain]
        self.assertEqual([(e["source"], e["target"]) for e in edges], list(zip(ids, ids[1:])))
        self.assertTrue(all(e["projectId"] == "p1" for e in edges))

    def test_structure_template(self):
        existing_blocks, existing_edges = [block("keep", "p9")], [{"id": "keep", "projectId": "p9"}]
        blocks, edges = add_structure_template(existing_blocks, existing_edges, "p1")
        self.assertEqual(len(project_blocks(blocks, "p1")), 4)
        self.assertEqual(len(project_edges(edges, "p1")), 2)
        self.assertEqual(blocks[-1]["id"], "keep")
        self.assertEqual(edges[-1]["id"], "keep")


if __name__ == "__main__":
    unittest.main()
