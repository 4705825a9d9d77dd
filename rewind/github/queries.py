"""GraphQL queries for the GitHub API"""

# Facets are capped at one page of 100; truncation is detected from totalCount
USER_CONTRIBUTIONS_QUERY = """
query($username: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $username) {
    login
    name
    avatarUrl
    contributionsCollection(from: $from, to: $to) {
      totalCommitContributions
      totalPullRequestContributions
      totalPullRequestReviewContributions
      totalIssueContributions
      totalRepositoryContributions
      restrictedContributionsCount

      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
          }
        }
      }

      commitContributionsByRepository(maxRepositories: 100) {
        repository {
          name
          nameWithOwner
          languages(first: 10, orderBy: {field: SIZE, direction: DESC}) {
            edges {
              size
              node {
                name
                color
              }
            }
          }
        }
        contributions {
          totalCount
        }
      }

      pullRequestContributions(first: 100) {
        totalCount
        nodes {
          pullRequest {
            merged
            repository {
              nameWithOwner
            }
          }
        }
      }

      pullRequestReviewContributions(first: 100) {
        totalCount
        nodes {
          pullRequest {
            author {
              login
            }
          }
        }
      }

      issueContributions(first: 100) {
        totalCount
        nodes {
          issue {
            closedAt
          }
        }
      }
    }
  }
}
"""

VIEWER_QUERY = """
query {
  viewer {
    login
    name
    avatarUrl
  }
}
"""
