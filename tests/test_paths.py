from demokit_inference.mapping.paths import extract_path_params, normalize_path_pattern


class TestNormalizePathPattern:
    def test_converts_brace_param(self):
        assert normalize_path_pattern("/users/{id}") == "/users/:id"

    def test_multiple_params(self):
        assert normalize_path_pattern("/users/{userId}/orders/{orderId}") == "/users/:userId/orders/:orderId"

    def test_path_without_params(self):
        assert normalize_path_pattern("/users") == "/users"

    def test_already_normalized(self):
        assert normalize_path_pattern("/users/:id") == "/users/:id"

    def test_long_versioned_path(self):
        assert (
            normalize_path_pattern("/api/v1/organizations/{orgId}/projects/{projectId}/members")
            == "/api/v1/organizations/:orgId/projects/:projectId/members"
        )

    def test_hyphenated_param(self):
        assert normalize_path_pattern("/users/{user-id}/posts/{post.slug}") == "/users/:user-id/posts/:post.slug"

    def test_idempotent(self):
        for path in ("/users/{id}", "/a/{b}/c/:d", "/", "/x/{y_z}/{w1}"):
            once = normalize_path_pattern(path)
            assert normalize_path_pattern(once) == once


class TestExtractPathParams:
    def test_single(self):
        assert extract_path_params("/users/:id") == ["id"]

    def test_multiple(self):
        assert extract_path_params("/users/:userId/orders/:orderId") == ["userId", "orderId"]

    def test_none(self):
        assert extract_path_params("/users") == []

    def test_underscores(self):
        assert extract_path_params("/users/:user_id/posts/:post_id") == ["user_id", "post_id"]

    def test_alphanumeric(self):
        assert extract_path_params("/items/:item123Id") == ["item123Id"]

    def test_keeps_duplicates(self):
        assert extract_path_params("/a/:id/b/:id") == ["id", "id"]

    def test_hyphenated_names(self):
        assert extract_path_params("/users/:user-id/posts/:post.slug") == ["user-id", "post.slug"]

    def test_count_matches_tokens_after_normalizing(self):
        for path in ("/users/{user-id}", "/a/{x}/b/{y-z}/c/{w_1}", "/orgs/{org id}"):
            pattern = normalize_path_pattern(path)
            assert "{" not in pattern
            assert len(extract_path_params(pattern)) == path.count("{")

    def test_round_trip_from_braces(self):
        names = ["orgId", "project_id", "env2", "deploymentId"]
        path = "".join(f"/seg{i}/{{{name}}}" for i, name in enumerate(names))
        assert extract_path_params(normalize_path_pattern(path)) == names
